"""Images and the repository that stores them."""

from __future__ import annotations

import abc
import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageEntity:
    """An uploaded image identified by id and stored at a path."""

    id: uuid.UUID
    path: str


def create_image(path: str) -> ImageEntity:
    """Make a new image with a fresh random id."""
    return ImageEntity(uuid.uuid4(), path)


class ImageRepositoryError(Exception):
    """Base class for image repository failures."""


class ImageFindError(ImageRepositoryError):
    """Lookup by id failed."""


class ImageFindByPathError(ImageRepositoryError):
    """Lookup by path failed."""


class ImageSaveError(ImageRepositoryError):
    """Saving an image failed."""


class ImageFindAllError(ImageRepositoryError):
    """Listing images failed."""


class ImageRepository(abc.ABC):
    """Storage for images."""

    @abc.abstractmethod
    async def find(self, id: str) -> ImageEntity:
        """Return the image with this id or raise ImageFindError."""

    @abc.abstractmethod
    async def find_by_path(self, path: str) -> ImageEntity:
        """Return the image at this path or raise ImageFindByPathError."""

    @abc.abstractmethod
    async def save(self, image: ImageEntity) -> ImageEntity:
        """Store the image and return it, or raise ImageSaveError."""

    @abc.abstractmethod
    async def find_all(self) -> list[ImageEntity]:
        """Return every image or raise ImageFindAllError."""