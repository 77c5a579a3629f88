import pytest

from cobalt.errors import ConfigError
from cobalt.paths import RelPath
from cobalt.site import Site


def test_defaults():
    site = Site()
    assert site.data_dir == "_data"
    assert site.title is None
    assert site.sitemap is None
    assert Site.from_dict(None) == site


def test_from_dict_values():
    site = Site.from_dict(
        {
            "title": "cobalt blog",
            "description": "Blog Posts Go Here",
            "base_url": "http://example.com",
            "sitemap": "./sitemap.xml",
            "data": {"owner": "someone"},
        }
    )
    assert site.title == "cobalt blog"
    assert site.description == "Blog Posts Go Here"
    assert site.base_url == "http://example.com"
    assert site.sitemap == RelPath("sitemap.xml")
    assert site.data == {"owner": "someone"}


def test_round_trip():
    site = Site(
        title="cobalt blog",
        base_url="http://example.com",
        sitemap=RelPath("maps/sitemap.xml"),
        data={"key": [1, 2]},
    )
    assert Site.from_dict(site.to_dict()) == site


def test_to_dict_keeps_unset_keys():
    out = Site().to_dict()
    assert set(out) == {"title", "description", "base_url", "sitemap", "data"}
    assert all(value is None for value in out.values())


def test_absolute_sitemap_is_rejected():
    with pytest.raises(ConfigError):
        Site.from_dict({"sitemap": "/sitemap.xml"})


@pytest.mark.parametrize(
    "data",
    [{"title": 5}, {"base_url": ["x"]}, {"data": "nope"}, ["title"]],
)
def test_rejects_bad_values(data):
    with pytest.raises(ConfigError):
        Site.from_dict(data)