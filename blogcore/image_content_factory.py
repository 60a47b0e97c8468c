"""Builds image blocks for post bodies from stored images."""

from __future__ import annotations

import uuid

from .contents import ImageContent
from .image import ImageFindByPathError, ImageRepository, ImageRepositoryError


class ImageContentFactoryError(Exception):
    """Base class for failures while building an image block."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageContentFactoryError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ImageNotFoundError(ImageContentFactoryError):
    """No image is stored at the requested path."""


class ImageRepositoryFailure(ImageContentFactoryError):
    """The image repository failed for another reason."""


class ImageContentFactory:
    """Creates image blocks that refer to images already in the repository."""

    def __init__(self, image_repository: ImageRepository) -> None:
        self._image_repository = image_repository

    async def create(self, path: str) -> ImageContent:
        """Look up the image at ``path`` and wrap it in a block with a fresh id."""
        try:
            image = await self._image_repository.find_by_path(path)
        except ImageFindByPathError as error:
            raise ImageNotFoundError(str(error)) from error
        except ImageRepositoryError as error:
            raise ImageRepositoryFailure(f"Repository error: {error!r}") from error
        return ImageContent(uuid.uuid4(), image)