"""Builds new blog posts from plain input data."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .blog_post import BlogPost
from .contents import H2, H3, CodeBlock, Content, Paragraph
from .image_content_factory import ImageContentFactory, ImageContentFactoryError
from .jst_date import JstDate
from .rich_text import Link, RichText, RichTextPart, RichTextStyles


@dataclass(frozen=True)
class CreateImageInput:
    """A thumbnail given by image id and path."""

    id: uuid.UUID
    path: str


@dataclass(frozen=True)
class StyleInput:
    """Inline styles requested for a piece of text."""

    bold: bool = False
    inline_code: bool = False


@dataclass(frozen=True)
class LinkInput:
    """A link target requested for a piece of text."""

    url: str


@dataclass(frozen=True)
class RichTextInput:
    """One piece of paragraph text with its styles and optional link."""

    text: str
    styles: StyleInput = field(default_factory=StyleInput)
    link: Optional[LinkInput] = None


@dataclass(frozen=True)
class H2Input:
    """A second-level heading to add."""

    id: uuid.UUID
    text: str


@dataclass(frozen=True)
class H3Input:
    """A third-level heading to add."""

    id: uuid.UUID
    text: str


@dataclass(frozen=True)
class ParagraphInput:
    """A paragraph to add, as a list of rich text pieces."""

    id: uuid.UUID
    text: Sequence[RichTextInput] = ()


@dataclass(frozen=True)
class ImageInput:
    """An image block to add; the image is looked up by path."""

    id: uuid.UUID
    path: str


@dataclass(frozen=True)
class CodeBlockInput:
    """A code block to add."""

    id: uuid.UUID
    title: str
    code: str
    language: str


ContentInput = Union[H2Input, H3Input, ParagraphInput, ImageInput, CodeBlockInput]


@dataclass
class CreateBlogPostInput:
    """Everything needed to create a new post."""

    title: str
    thumbnail: Optional[CreateImageInput] = None
    post_date: Optional[JstDate] = None
    last_update_date: Optional[JstDate] = None
    published_date: Optional[JstDate] = None
    contents: Sequence[ContentInput] = ()


class BlogPostFactoryError(Exception):
    """Raised when an image block of the new post cannot be built."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Image content creation failed: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlogPostFactoryError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((BlogPostFactoryError, self.message))


class BlogPostFactory:
    """Creates new posts with fresh ids."""

    def __init__(self, image_content_factory: ImageContentFactory) -> None:
        self._image_content_factory = image_content_factory

    async def create(self, input: CreateBlogPostInput) -> BlogPost:
        """Build a post from the input.

        The last update date falls back to the post date when only the
        post date is given; unset dates stay at today's date.
        """
        post = BlogPost(uuid.uuid4(), input.title)

        if input.post_date is not None:
            post.post_date = input.post_date

        if input.last_update_date is not None:
            post.last_update_date = input.last_update_date
        elif input.post_date is not None:
            post.last_update_date = input.post_date

        if input.published_date is not None:
            post.published_date = input.published_date

        if input.thumbnail is not None:
            post.set_thumbnail(input.thumbnail.id, input.thumbnail.path)

        for content_input in input.contents:
            post.add_content(await self._convert_content(content_input))

        return post

    async def _convert_content(self, content: ContentInput) -> Content:
        if isinstance(content, H2Input):
            return H2(content.id, content.text)
        if isinstance(content, H3Input):
            return H3(content.id, content.text)
        if isinstance(content, ParagraphInput):
            return Paragraph(content.id, RichText(tuple(_convert_rich_text(part) for part in content.text)))
        if isinstance(content, ImageInput):
            try:
                return await self._image_content_factory.create(content.path)
            except ImageContentFactoryError as error:
                raise BlogPostFactoryError(f"Image content creation failed: {error!r}") from error
        if isinstance(content, CodeBlockInput):
            return CodeBlock(content.id, content.title, content.code, content.language)
        raise TypeError(f"unknown content input: {content!r}")


def _convert_rich_text(part: RichTextInput) -> RichTextPart:
    link = Link(part.link.url) if part.link is not None else None
    styles = RichTextStyles(bold=part.styles.bold, inline_code=part.styles.inline_code)
    return RichTextPart(part.text, styles, link)