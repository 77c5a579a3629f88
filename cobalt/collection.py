"""Collection settings for pages and posts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cobalt.errors import ConfigError
from cobalt.frontmatter import Frontmatter
from cobalt.pagination import SortOrder
from cobalt.paths import RelPath


def _check_mapping(data: object, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{what} must be a mapping, got {data!r}")
    return data


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return value


def _rel_path(value: object, key: str) -> RelPath:
    try:
        return RelPath.parse(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid `{key}`: {exc}") from exc


def _opt_rel_path(data: Mapping[str, Any], key: str) -> RelPath | None:
    value = data.get(key)
    return None if value is None else _rel_path(value, key)


def _order(data: Mapping[str, Any], default: SortOrder) -> SortOrder:
    value = data.get("order")
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"`order` must be a string, got {value!r}")
    return SortOrder(value)


def _bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean, got {value!r}")
    return value


def _opt_path_str(path: RelPath | None) -> str | None:
    return None if path is None else path.as_str()


@dataclass
class PageCollection:
    """Settings for the pages collection."""

    default: Frontmatter = field(default_factory=Frontmatter)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PageCollection:
        data = _check_mapping(data, "pages")
        return cls(default=Frontmatter.from_dict(data.get("default")))

    def to_dict(self) -> dict[str, Any]:
        return {"default": self.default.to_dict()}


@dataclass
class PostCollection:
    """Settings for the posts collection."""

    title: str | None = None
    description: str | None = None
    dir: RelPath = field(default_factory=lambda: RelPath("posts"))
    drafts_dir: RelPath | None = None
    order: SortOrder = SortOrder.DESC
    rss: RelPath | None = None
    jsonfeed: RelPath | None = None
    publish_date_in_filename: bool = True
    default: Frontmatter = field(default_factory=Frontmatter)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PostCollection:
        data = _check_mapping(data, "posts")
        kwargs: dict[str, Any] = {}
        if "dir" in data:
            kwargs["dir"] = _rel_path(data["dir"], "dir")
        return cls(
            title=_opt_str(data, "title"),
            description=_opt_str(data, "description"),
            drafts_dir=_opt_rel_path(data, "drafts_dir"),
            order=_order(data, SortOrder.DESC),
            rss=_opt_rel_path(data, "rss"),
            jsonfeed=_opt_rel_path(data, "jsonfeed"),
            publish_date_in_filename=_bool(data, "publish_date_in_filename", True),
            default=Frontmatter.from_dict(data.get("default")),
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "dir": self.dir.as_str(),
            "drafts_dir": _opt_path_str(self.drafts_dir),
            "order": self.order.value,
            "rss": _opt_path_str(self.rss),
            "jsonfeed": _opt_path_str(self.jsonfeed),
            "publish_date_in_filename": self.publish_date_in_filename,
            "default": self.default.to_dict(),
        }


@dataclass
class Collection:
    """The settings common to every kind of collection."""

    title: str | None = None
    description: str | None = None
    dir: RelPath | None = None
    drafts_dir: RelPath | None = None
    order: SortOrder = SortOrder.DESC
    rss: RelPath | None = None
    jsonfeed: RelPath | None = None
    publish_date_in_filename: bool = False
    default: Frontmatter = field(default_factory=Frontmatter)

    @classmethod
    def from_posts(cls, other: PostCollection) -> Collection:
        return cls(
            title=other.title,
            description=other.description,
            dir=other.dir,
            drafts_dir=other.drafts_dir,
            order=other.order,
            rss=other.rss,
            jsonfeed=other.jsonfeed,
            publish_date_in_filename=other.publish_date_in_filename,
            default=other.default,
        )

    @classmethod
    def from_pages(cls, other: PageCollection) -> Collection:
        # Pages have excerpts disabled unless asked for.
        default = other.default.merge(Frontmatter(excerpt_separator=""))
        return cls(default=default, dir=RelPath(), order=SortOrder.NONE)