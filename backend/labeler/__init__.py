"""Labels raster images in a design document with names read from their metadata."""

__version__ = "0.1.0"
