"""Utility functions for reading image files."""

from .image import ImageSource, detect_media_type, read_image_file

__all__ = ["ImageSource", "detect_media_type", "read_image_file"]
