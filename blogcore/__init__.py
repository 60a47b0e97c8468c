"""Blog domain model: posts, contents, rich text, images, featured sets, factories and JST dates."""

__version__ = "0.1.0"