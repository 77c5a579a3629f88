import pytest

from cobalt.collection import Collection, PageCollection, PostCollection
from cobalt.errors import ConfigError
from cobalt.frontmatter import Frontmatter
from cobalt.pagination import SortOrder
from cobalt.paths import RelPath


def test_post_collection_defaults():
    posts = PostCollection()
    assert posts.dir == "posts"
    assert posts.publish_date_in_filename is True
    assert posts.order is SortOrder.DESC


def test_post_collection_from_empty_dict_matches_default():
    assert PostCollection.from_dict({}) == PostCollection()
    assert PostCollection.from_dict(None) == PostCollection()


def test_post_collection_round_trip():
    posts = PostCollection(
        title="Blog",
        dir=RelPath("articles"),
        drafts_dir=RelPath("drafts"),
        order=SortOrder.ASC,
        rss=RelPath("rss.xml"),
        publish_date_in_filename=False,
        default=Frontmatter(layout="post.liquid"),
    )
    assert PostCollection.from_dict(posts.to_dict()) == posts


def test_post_collection_rejects_absolute_dir():
    with pytest.raises(ConfigError):
        PostCollection.from_dict({"dir": "/abs/posts"})


def test_post_collection_unknown_order():
    assert PostCollection.from_dict({"order": "Sideways"}).order is SortOrder.UNKNOWN


def test_page_collection_round_trip():
    pages = PageCollection(default=Frontmatter(layout="default.liquid"))
    assert PageCollection.from_dict(pages.to_dict()) == pages


def test_from_posts_keeps_settings():
    posts = PostCollection(title="Blog", drafts_dir=RelPath("drafts"))
    collection = Collection.from_posts(posts)
    assert collection.title == "Blog"
    assert collection.dir == posts.dir
    assert collection.drafts_dir == posts.drafts_dir
    assert collection.publish_date_in_filename is True


def test_from_pages_disables_excerpts():
    collection = Collection.from_pages(PageCollection())
    assert collection.default.excerpt_separator == ""
    assert collection.dir.as_str() == ""
    assert collection.order is SortOrder.NONE
    assert collection.publish_date_in_filename is False


def test_from_pages_keeps_explicit_separator():
    pages = PageCollection(default=Frontmatter(excerpt_separator="<!--more-->"))
    collection = Collection.from_pages(pages)
    assert collection.default.excerpt_separator == "<!--more-->"