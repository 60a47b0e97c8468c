"""The blog post aggregate."""

from __future__ import annotations

import uuid
from typing import Optional

from .contents import Content
from .image import ImageEntity
from .jst_date import JstDate


class BlogPost:
    """A blog post with its title, body blocks, thumbnail and dates.

    A new post has no contents and no thumbnail. Its post, last update
    and publication dates are all today's date in JST.
    """

    def __init__(self, id: uuid.UUID, title: str) -> None:
        today = JstDate.today()
        self.id = id
        self.title = title
        self.contents: list[Content] = []
        self.thumbnail: Optional[ImageEntity] = None
        self.post_date: JstDate = today
        self.last_update_date: JstDate = today
        self.published_date: JstDate = today

    def set_thumbnail(self, id: uuid.UUID, path: str) -> BlogPost:
        """Use the image with this id and path as the thumbnail."""
        self.thumbnail = ImageEntity(id, path)
        return self

    def add_content(self, content: Content) -> BlogPost:
        """Append a block to the end of the body."""
        self.contents.append(content)
        return self

    def is_published(self) -> bool:
        """True once the publication date is today or earlier in JST."""
        return self.published_date <= JstDate.today()

    def update_title(self, title: str) -> BlogPost:
        """Replace the title."""
        self.title = title
        return self

    def clear_contents(self) -> BlogPost:
        """Remove every block from the body."""
        self.contents.clear()
        return self

    def __repr__(self) -> str:
        return (
            f"BlogPost(id={self.id!s}, title={self.title!r}, "
            f"contents={len(self.contents)}, published_date={self.published_date})"
        )