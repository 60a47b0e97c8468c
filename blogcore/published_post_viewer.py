"""Access rules that keep unpublished posts hidden."""

from __future__ import annotations

from typing import Iterable

from .blog_post import BlogPost
from .errors import UnpublishedPostAccessError


class PublishedPostViewerService:
    """Lets readers see published posts only."""

    def filter_published_posts(self, blog_posts: Iterable[BlogPost]) -> list[BlogPost]:
        """Keep only the published posts, in their original order."""
        return [post for post in blog_posts if post.is_published()]

    def view_published_post(self, blog_post: BlogPost) -> BlogPost:
        """Return the post if it is published; otherwise raise UnpublishedPostAccessError."""
        if not blog_post.is_published():
            raise UnpublishedPostAccessError(blog_post.title)
        return blog_post