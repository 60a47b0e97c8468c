import datetime as dt
import uuid

import pytest

from blogcore.blog_post_factory import (
    BlogPostFactory,
    BlogPostFactoryError,
    CodeBlockInput,
    CreateBlogPostInput,
    CreateImageInput,
    H2Input,
    H3Input,
    ImageInput,
    LinkInput,
    ParagraphInput,
    RichTextInput,
    StyleInput,
)
from blogcore.contents import H2, H3, CodeBlock, ImageContent, Paragraph
from blogcore.image import (
    ImageEntity,
    ImageFindAllError,
    ImageFindByPathError,
    ImageFindError,
    ImageRepository,
    ImageSaveError,
)
from blogcore.image_content_factory import ImageContentFactory
from blogcore.jst_date import JstDate


class MockImageRepository(ImageRepository):
    def __init__(self):
        self.images = {}

    def add_image(self, path, image):
        self.images[path] = image

    async def find(self, id):
        raise ImageFindError("not implemented")

    async def find_by_path(self, path):
        try:
            return self.images[path]
        except KeyError:
            raise ImageFindByPathError(f"Image not found for path: {path}") from None

    async def save(self, image):
        raise ImageSaveError("not implemented")

    async def find_all(self):
        raise ImageFindAllError("not implemented")


def make_factory(repo=None):
    return BlogPostFactory(ImageContentFactory(repo or MockImageRepository()))


@pytest.mark.asyncio
async def test_basic_blog_post_creation():
    post = await make_factory().create(CreateBlogPostInput(title="テスト記事"))
    assert post.title == "テスト記事"
    assert post.thumbnail is None
    assert len(post.contents) == 0
    assert post.post_date == JstDate.today()


@pytest.mark.asyncio
async def test_blog_post_creation_with_thumbnail():
    thumbnail_id = uuid.UUID("00000000-0000-0000-0000-000000000001")
    post = await make_factory().create(
        CreateBlogPostInput(
            title="サムネイル付き記事",
            thumbnail=CreateImageInput(thumbnail_id, "path/to/thumbnail.jpg"),
        )
    )
    assert post.thumbnail.id == thumbnail_id
    assert post.thumbnail.path == "path/to/thumbnail.jpg"


@pytest.mark.asyncio
async def test_blog_post_creation_with_multiple_content_types():
    repo = MockImageRepository()
    image_path = "path/to/image.jpg"
    image_entity = ImageEntity(uuid.uuid4(), image_path)
    repo.add_image(image_path, image_entity)

    ids = [uuid.UUID(f"00000000-0000-0000-0000-00000000000{i}") for i in range(1, 6)]
    post = await make_factory(repo).create(
        CreateBlogPostInput(
            title="複合記事",
            contents=[
                H2Input(ids[0], "見出し2"),
                H3Input(ids[1], "見出し3"),
                ParagraphInput(ids[2], [RichTextInput("段落テキスト", StyleInput(False, False), None)]),
                ImageInput(ids[3], image_path),
                CodeBlockInput(ids[4], "サンプルコード", 'println!("Hello, world!");', "rust"),
            ],
        )
    )

    contents = post.contents
    assert len(contents) == 5
    assert isinstance(contents[0], H2)
    assert contents[0].text == "見出し2"
    assert isinstance(contents[1], H3)
    assert contents[1].text == "見出し3"
    assert isinstance(contents[2], Paragraph)
    assert isinstance(contents[3], ImageContent)
    assert contents[3].image == image_entity
    assert contents[3].path == image_path
    assert isinstance(contents[4], CodeBlock)
    assert contents[4].language == "rust"
    assert contents[4].code == 'println!("Hello, world!");'


@pytest.mark.asyncio
async def test_blog_post_creation_with_specified_dates():
    specified = JstDate.from_date(dt.date(2024, 6, 15))
    post = await make_factory().create(
        CreateBlogPostInput(title="日付指定記事", post_date=specified, last_update_date=specified)
    )
    assert post.post_date == specified
    assert post.last_update_date == specified


@pytest.mark.asyncio
async def test_last_update_date_falls_back_to_post_date():
    specified = JstDate.of(2024, 6, 15)
    post = await make_factory().create(CreateBlogPostInput(title="記事", post_date=specified))
    assert post.last_update_date == specified


@pytest.mark.asyncio
async def test_explicit_last_update_date_wins_over_post_date():
    post_date = JstDate.of(2024, 6, 15)
    last_update = JstDate.of(2024, 6, 20)
    post = await make_factory().create(
        CreateBlogPostInput(title="記事", post_date=post_date, last_update_date=last_update)
    )
    assert post.post_date == post_date
    assert post.last_update_date == last_update


@pytest.mark.asyncio
async def test_rich_text_conversion_accuracy():
    para_id = uuid.UUID("00000000-0000-0000-0000-000000000001")
    post = await make_factory().create(
        CreateBlogPostInput(
            title="リッチテキスト記事",
            contents=[
                ParagraphInput(
                    para_id,
                    [
                        RichTextInput("通常テキスト", StyleInput(False, False), None),
                        RichTextInput("太字テキスト", StyleInput(True, False), None),
                        RichTextInput("リンクテキスト", StyleInput(False, False), LinkInput("https://example.com")),
                        RichTextInput("インラインコード", StyleInput(False, True), None),
                    ],
                )
            ],
        )
    )

    paragraph = post.contents[0]
    assert isinstance(paragraph, Paragraph)
    assert paragraph.id == para_id
    parts = paragraph.text
    assert len(parts) == 4

    assert parts[0].text == "通常テキスト"
    assert not parts[0].styles.bold
    assert not parts[0].styles.inline_code
    assert parts[0].link is None

    assert parts[1].text == "太字テキスト"
    assert parts[1].styles.bold
    assert not parts[1].styles.inline_code

    assert parts[2].text == "リンクテキスト"
    assert parts[2].link.url == "https://example.com"

    assert parts[3].text == "インラインコード"
    assert not parts[3].styles.bold
    assert parts[3].styles.inline_code


@pytest.mark.asyncio
async def test_edge_case_empty_content():
    post = await make_factory().create(CreateBlogPostInput(title="空の記事", contents=[]))
    assert len(post.contents) == 0
    assert post.title == "空の記事"


@pytest.mark.asyncio
async def test_factory_generates_unique_ids_automatically():
    factory = make_factory()
    post1 = await factory.create(CreateBlogPostInput(title="記事1"))
    post2 = await factory.create(CreateBlogPostInput(title="記事2"))

    assert post1.id != post2.id
    assert post1.id != uuid.UUID(int=0)
    assert post2.id != uuid.UUID(int=0)
    assert post1.id.version == 4
    assert post2.id.version == 4


@pytest.mark.asyncio
async def test_multiple_executions_generate_different_ids_each_time():
    factory = make_factory()
    generated = set()
    for _ in range(10):
        post = await factory.create(CreateBlogPostInput(title="テスト記事"))
        assert post.id not in generated
        generated.add(post.id)
    assert len(generated) == 10


@pytest.mark.asyncio
async def test_blog_post_creation_with_specified_published_date():
    published = JstDate.from_date(dt.date(2024, 7, 20))
    post = await make_factory().create(CreateBlogPostInput(title="公開日指定記事", published_date=published))
    assert post.published_date == published
    assert post.title == "公開日指定記事"


@pytest.mark.asyncio
async def test_blog_post_creation_without_published_date_uses_default():
    post = await make_factory().create(CreateBlogPostInput(title="デフォルト公開日記事"))
    assert post.published_date == JstDate.today()
    assert post.title == "デフォルト公開日記事"


@pytest.mark.asyncio
async def test_missing_image_raises_factory_error():
    with pytest.raises(BlogPostFactoryError) as info:
        await make_factory().create(
            CreateBlogPostInput(
                title="画像なし",
                contents=[ImageInput(uuid.uuid4(), "nonexistent/path.jpg")],
            )
        )
    message = str(info.value)
    assert message.startswith("Image content creation failed: ")
    assert "nonexistent/path.jpg" in message