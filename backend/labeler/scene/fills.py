"""Fill descriptors — a tagged union discriminated on ``type``."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class SolidFill(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["SOLID"] = "SOLID"
    color: Color = Field(default_factory=Color)
    opacity: float = 1.0
    visible: bool = True


class ImageFill(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["IMAGE"] = "IMAGE"
    image_hash: str | None = None
    scale_mode: Literal["FILL", "FIT", "CROP", "TILE"] = "FILL"
    opacity: float = 1.0
    visible: bool = True


class GradientStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float
    color: Color = Field(default_factory=Color)


class GradientFill(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[
        "GRADIENT_LINEAR",
        "GRADIENT_RADIAL",
        "GRADIENT_ANGULAR",
        "GRADIENT_DIAMOND",
    ] = "GRADIENT_LINEAR"
    stops: tuple[GradientStop, ...] = ()
    opacity: float = 1.0
    visible: bool = True


Fill = Annotated[Union[SolidFill, ImageFill, GradientFill], Field(discriminator="type")]

BLACK = SolidFill(color=Color(r=0.0, g=0.0, b=0.0))


def first_image_fill(fills: tuple[Fill, ...] | list[Fill]) -> ImageFill | None:
    """Return the first image fill in paint order, hidden ones included."""
    for fill in fills:
        if isinstance(fill, ImageFill):
            return fill
    return None
