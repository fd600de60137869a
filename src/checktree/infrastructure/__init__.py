"""Infrastructure layer: adapters onto rendering libraries."""

from checktree.infrastructure.rich_surface import (
    DEFAULT_STYLES,
    PlainTextSurface,
    RichTextSurface,
)

__all__ = [
    "DEFAULT_STYLES",
    "PlainTextSurface",
    "RichTextSurface",
]
