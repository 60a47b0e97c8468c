"""Featured posts: the pick-ups, the popular posts and the top tech pick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .blog_post import BlogPost


class _ThreePostSet:
    """A set of exactly three posts, kept in the given order."""

    _message = "記事は必ず3件です"

    def __init__(self, posts: Iterable[BlogPost]) -> None:
        posts = tuple(posts)
        if len(posts) != 3:
            raise ValueError(self._message)
        self.posts: tuple[BlogPost, BlogPost, BlogPost] = posts

    def __iter__(self) -> Iterator[BlogPost]:
        return iter(self.posts)

    def __len__(self) -> int:
        return len(self.posts)

    def __getitem__(self, index: int) -> BlogPost:
        return self.posts[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.posts)!r})"


class PickUpPostSet(_ThreePostSet):
    """The pick-up posts; there are always exactly three."""

    _message = "ピックアップ記事は必ず3件です"

    def __init__(self, posts: Iterable[BlogPost]) -> None:
        super().__init__(posts)

    def __iter__(self) -> Iterator[BlogPost]:
        return super().__iter__()


class PopularPostSet(_ThreePostSet):
    """The popular posts; there are always exactly three."""

    _message = "人気記事は必ず3件です"

    def __init__(self, posts: Iterable[BlogPost]) -> None:
        super().__init__(posts)

    def __iter__(self) -> Iterator[BlogPost]:
        return super().__iter__()


@dataclass
class TopTechPick:
    """The single post featured as the top tech pick."""

    post: BlogPost