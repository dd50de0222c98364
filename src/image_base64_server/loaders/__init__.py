"""Image loadability checks used as the last decode validation step."""

from .base import ImageLoader
from .pillow import BROWSER_FORMATS, PillowImageLoader

__all__ = ["BROWSER_FORMATS", "ImageLoader", "PillowImageLoader"]
