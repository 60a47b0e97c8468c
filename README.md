# blogcore

The domain layer of a blog. It has no runtime dependencies.

## What is in it

- `blogcore.blog_post.BlogPost` is the aggregate root. It holds an `id`, a `title`, an optional `thumbnail` (an `ImageEntity`), an ordered `contents` list, and three `JstDate` fields: `post_date`, `last_update_date` and `published_date`. A new post has no contents and no thumbnail, and all three dates are set to today in JST. Its methods are `set_thumbnail(id, path)`, `add_content(content)`, `update_title(title)`, `clear_contents()` and `is_published()`. `is_published()` is true once `published_date` is today or earlier. Every mutating method returns the post, so calls can be chained.
- `blogcore.contents` holds the body blocks. They are frozen dataclasses: `H2`, `H3`, `Paragraph` (its text is a `RichText`), `ImageContent` and `CodeBlock`. `ImageContent` wraps an `ImageEntity` and has a `path` property.
- `blogcore.rich_text` defines the following:
  - `RichText` is an iterable, indexable sequence of `RichTextPart`s.
  - Each `RichTextPart` has `text`, `styles` and an optional `link`.
  - `styles` is a `RichTextStyles` with `bold` and `inline_code`, both defaulting to `False`.
  - `link` is a `Link` with a `url`.
- `blogcore.jst_date.JstDate` is an ordered, immutable calendar date in Japan Standard Time (UTC+09:00).
  - Build one with `JstDate.of(year, month, day)`, `JstDate.from_date(date)`, `JstDate.today()`, `JstDate.from_utc_datetime(dt)` or `JstDate.parse("2024-03-15")`.
  - A naive datetime passed to `from_utc_datetime` is taken as UTC.
  - `to_date()` and `to_utc_datetime()` convert back. `to_utc_datetime()` gives 00:00 JST of that day, expressed in UTC.
  - `year`, `month` and `day` are properties.
  - `str()` gives `YYYY-MM-DD`.
- `blogcore.errors` defines `BlogDomainError` and its two subclasses:
  - `UnpublishedPostAccessError(post_title)`
  - `InvalidDateError(detail)`

  `JstDate.of` and `JstDate.parse` raise `InvalidDateError` for dates that do not exist, such as 30 February.
- `blogcore.post_sets` holds the featured posts:
  - `PickUpPostSet` and `PopularPostSet` each take exactly three posts and keep them in order. Any other count raises `ValueError`. The sets are iterable and indexable.
  - `TopTechPick` holds a single `post`.
- `blogcore.image` defines the following:
  - `ImageEntity(id, path)`.
  - `create_image(path)`, which gives a new image a random UUID4.
  - The abstract, async `ImageRepository`, with `find`, `find_by_path`, `save` and `find_all`.
  - The error hierarchy `ImageRepositoryError`, with subclasses `ImageFindError`, `ImageFindByPathError`, `ImageSaveError` and `ImageFindAllError`.
- `blogcore.image_content_factory.ImageContentFactory(repository)` looks up an image by path. Its `create(path)` coroutine returns an `ImageContent` with a fresh id.
  - A `ImageFindByPathError` from the repository becomes `ImageNotFoundError`.
  - Any other repository error becomes `ImageRepositoryFailure`.
  - Both derive from `ImageContentFactoryError`.
- `blogcore.blog_post_factory.BlogPostFactory(image_content_factory)` builds a new post with a random id from a `CreateBlogPostInput`, through its `create(input)` coroutine.
  - Content inputs are `H2Input`, `H3Input`, `ParagraphInput` (a list of `RichTextInput` with `StyleInput` and optional `LinkInput`), `ImageInput` and `CodeBlockInput`. The thumbnail is a `CreateImageInput`.
  - If only `post_date` is given, `last_update_date` is set to it as well. Any date left unset stays at today.
  - For an `ImageInput`, the image is resolved by its path, and the block gets a new id.
  - If an image cannot be resolved, `create` raises `BlogPostFactoryError`.
- `blogcore.published_post_viewer.PublishedPostViewerService` keeps unpublished posts hidden.
  - `filter_published_posts(posts)` keeps only published posts, in their original order.
  - `view_published_post(post)` returns the post, or raises `UnpublishedPostAccessError` if it is not yet published.

## Example

```python
import asyncio
import uuid

from blogcore.blog_post_factory import (
    BlogPostFactory, CreateBlogPostInput, H2Input, ParagraphInput,
    RichTextInput, StyleInput,
)
from blogcore.image import ImageEntity, ImageFindByPathError, ImageRepository
from blogcore.image_content_factory import ImageContentFactory
from blogcore.jst_date import JstDate
from blogcore.published_post_viewer import PublishedPostViewerService


class InMemoryImages(ImageRepository):
    def __init__(self):
        self._by_path = {}

    async def find(self, id):
        return next(i for i in self._by_path.values() if str(i.id) == id)

    async def find_by_path(self, path):
        try:
            return self._by_path[path]
        except KeyError:
            raise ImageFindByPathError(f"Image not found for path: {path}") from None

    async def save(self, image):
        self._by_path[image.path] = image
        return image

    async def find_all(self):
        return list(self._by_path.values())


async def main():
    factory = BlogPostFactory(ImageContentFactory(InMemoryImages()))
    post = await factory.create(
        CreateBlogPostInput(
            title="Hello",
            published_date=JstDate.of(2024, 6, 15),
            contents=[
                H2Input(uuid.uuid4(), "Intro"),
                ParagraphInput(uuid.uuid4(), [RichTextInput("Bold words", StyleInput(bold=True))]),
            ],
        )
    )
    return PublishedPostViewerService().view_published_post(post)


asyncio.run(main())
```

## What it does not do

This package holds the domain model only:

- There is no storage for posts. Only the abstract `ImageRepository` interface is defined, and you supply its implementation.
- There is no database access, no HTTP API and no command-line tool.

## Tests

Install the `test` extra, then run `pytest` from the project root.