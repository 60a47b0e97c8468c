"""Rich text made of styled and linked pieces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class RichTextStyles:
    """Inline styles of one piece of text."""

    bold: bool = False
    inline_code: bool = False


@dataclass(frozen=True)
class Link:
    """A hyperlink target."""

    url: str


@dataclass(frozen=True)
class RichTextPart:
    """A run of text with its styles and an optional link."""

    text: str
    styles: RichTextStyles = field(default_factory=RichTextStyles)
    link: Optional[Link] = None

    def __post_init__(self) -> None:
        if self.styles is None:
            object.__setattr__(self, "styles", RichTextStyles())


@dataclass(frozen=True)
class RichText:
    """A sequence of rich text parts."""

    parts: tuple[RichTextPart, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    def __iter__(self) -> Iterator[RichTextPart]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> RichTextPart:
        return self.parts[index]