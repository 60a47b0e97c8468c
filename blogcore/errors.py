"""Errors raised by the blog domain."""

from __future__ import annotations


class BlogDomainError(Exception):
    """Base class for blog domain errors."""

    def _key(self) -> tuple:
        return (type(self),) + self.args

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlogDomainError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class UnpublishedPostAccessError(BlogDomainError):
    """Raised when someone tries to view a post that is not yet published."""

    def __init__(self, post_title: str) -> None:
        super().__init__(post_title)
        self.post_title = post_title

    def __str__(self) -> str:
        return f"未公開記事「{self.post_title}」にアクセスすることはできません"

    def __repr__(self) -> str:
        return f"UnpublishedPostAccessError(post_title={self.post_title!r})"


class InvalidDateError(BlogDomainError):
    """Raised when a date cannot be built from the given values."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"無効な日付: {self.detail}"

    def __repr__(self) -> str:
        return f"InvalidDateError(detail={self.detail!r})"