"""UI <-> plugin message protocol."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, RootModel, TypeAdapter

# --- Inbound (UI -> plugin) ---


class LabelSelectionMessage(BaseModel):
    type: Literal["label-selection"] = "label-selection"


class GetSelectionInfoMessage(BaseModel):
    type: Literal["get-selection-info"] = "get-selection-info"


class CloseMessage(BaseModel):
    type: Literal["close"] = "close"


class ToggleVisibilityMessage(BaseModel):
    """Kept for older UIs; has no effect."""

    type: Literal["toggle-visibility"] = "toggle-visibility"


InboundMessage = Annotated[
    Union[LabelSelectionMessage, GetSelectionInfoMessage, CloseMessage, ToggleVisibilityMessage],
    Field(discriminator="type"),
]

inbound_adapter: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)


class InboundEnvelope(RootModel[InboundMessage]):
    """Request body wrapper so the bridge validates the union in one step."""


def parse_inbound(payload: dict | str) -> InboundMessage:
    """Validate a raw UI message. Raises pydantic.ValidationError on unknown types."""
    if isinstance(payload, str):
        return inbound_adapter.validate_json(payload)
    return inbound_adapter.validate_python(payload)


# --- Outbound (plugin -> UI) ---


class LabelsCreatedMessage(BaseModel):
    type: Literal["labels-created"] = "labels-created"
    count: int


class SelectionInfoMessage(BaseModel):
    type: Literal["selection-info"] = "selection-info"
    count: int


OutboundMessage = Annotated[
    Union[LabelsCreatedMessage, SelectionInfoMessage],
    Field(discriminator="type"),
]
