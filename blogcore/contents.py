"""The blocks a blog post is built from."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Union

from .image import ImageEntity
from .rich_text import RichText


@dataclass(frozen=True)
class H2:
    """A second-level heading."""

    id: uuid.UUID
    text: str


@dataclass(frozen=True)
class H3:
    """A third-level heading."""

    id: uuid.UUID
    text: str


@dataclass(frozen=True)
class Paragraph:
    """A paragraph of rich text."""

    id: uuid.UUID
    text: RichText


@dataclass(frozen=True)
class ImageContent:
    """An image placed in the body of a post."""

    id: uuid.UUID
    image: ImageEntity

    @property
    def path(self) -> str:
        return self.image.path


@dataclass(frozen=True)
class CodeBlock:
    """A titled block of source code."""

    id: uuid.UUID
    title: str
    code: str
    language: str


Content = Union[H2, H3, Paragraph, ImageContent, CodeBlock]