"""Rendering surfaces backed by rich.text.Text and plain strings."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from rich.text import Text

from checktree.domain.model.enums import StyleHint

DEFAULT_STYLES: Mapping[StyleHint, str] = MappingProxyType(
    {
        StyleHint.REGULAR: "",
        StyleHint.GRAYED: "dim",
        StyleHint.ERROR: "bold red",
        StyleHint.LINK: "underline cyan",
    }
)


class RichTextSurface:
    """RenderSurface appending to a rich Text.

    Style hints map to rich style strings. Unmapped hints render unstyled.
    """

    def __init__(self, styles: Mapping[StyleHint, str] | None = None) -> None:
        """Initialize surface.

        Args:
            styles: StyleHint → rich style mapping. Uses DEFAULT_STYLES if None.
        """
        self._styles = styles if styles is not None else DEFAULT_STYLES
        self._text = Text()

    @property
    def text(self) -> Text:
        """Rendered rich Text."""
        return self._text

    def append(self, text: str, style: StyleHint | None = None) -> None:
        """Append text fragment with the style mapped from hint."""
        rich_style = self._styles.get(style, "") if style is not None else ""
        self._text.append(text, style=rich_style or None)

    @property
    def plain(self) -> str:
        """Rendered text without styling."""
        return self._text.plain


class PlainTextSurface:
    """RenderSurface collecting plain text. Style hints are kept, not drawn."""

    def __init__(self) -> None:
        self._fragments: list[tuple[str, StyleHint | None]] = []

    @property
    def fragments(self) -> tuple[tuple[str, StyleHint | None], ...]:
        """Appended (text, style) pairs in order."""
        return tuple(self._fragments)

    def append(self, text: str, style: StyleHint | None = None) -> None:
        self._fragments.append((text, style))

    @property
    def plain(self) -> str:
        return "".join(text for text, _ in self._fragments)
