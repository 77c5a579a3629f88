"""Site configuration, documents, frontmatter, source walking and a development file server."""

__version__ = "0.1.0"