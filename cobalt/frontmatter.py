"""Per-document metadata and the rules for filling it from paths and defaults."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Union

import yaml

from cobalt.errors import ConfigError
from cobalt.pagination import Pagination
from cobalt.paths import RelPath, parse_file_stem, slugify, split_ext, titleize_slug
from cobalt.timestamp import format_datetime, parse_datetime

_PATH_TEMPLATE = "/{{parent}}/{{name}}{{ext}}"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class PermalinkAlias(Enum):
    """Named permalink styles."""

    PATH = "path"


@dataclass(frozen=True, order=True)
class ExplicitPermalink:
    """A permalink template given as an absolute URL path."""

    value: str

    @classmethod
    def parse(cls, value: str | ExplicitPermalink) -> ExplicitPermalink:
        """Build a permalink, raising ValueError unless it starts with ``/``."""
        if isinstance(value, ExplicitPermalink):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a string permalink, got {value!r}")
        if not value.startswith("/"):
            raise ValueError("Permalinks must be absolute paths")
        return cls(value)

    @classmethod
    def from_unchecked(cls, value: str) -> ExplicitPermalink:
        return cls(value)

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Permalink = Union[PermalinkAlias, ExplicitPermalink]


def permalink_as_str(permalink: Permalink) -> str:
    """The permalink template a permalink stands for."""
    if isinstance(permalink, PermalinkAlias):
        return _PATH_TEMPLATE
    return permalink.as_str()


class SourceFormat(Enum):
    RAW = "Raw"
    MARKDOWN = "Markdown"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls.UNKNOWN
        return None


def _parse_permalink(value: object) -> Permalink | None:
    if value is None or isinstance(value, (PermalinkAlias, ExplicitPermalink)):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"`permalink` must be a string, got {value!r}")
    try:
        return PermalinkAlias(value)
    except ValueError:
        pass
    try:
        return ExplicitPermalink.parse(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid `permalink`: {exc}") from exc


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return value


def _opt_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean, got {value!r}")
    return value


def _opt_i32(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not _I32_MIN <= value <= _I32_MAX:
        raise ConfigError(f"`{key}` must be an integer, got {value!r}")
    return value


def _opt_str_list(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"`{key}` must be a list of strings, got {value!r}")
    return list(value)


def _opt_datetime(data: Mapping[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if value is None:
        return None
    try:
        return parse_datetime(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid `{key}`: {exc}") from exc


@dataclass
class Frontmatter:
    """Metadata at the top of a document; unset fields are None."""

    permalink: Permalink | None = None
    slug: str | None = None
    title: str | None = None
    description: str | None = None
    excerpt: str | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
    excerpt_separator: str | None = None
    published_date: datetime | None = None
    format: SourceFormat | None = None
    templated: bool | None = None
    layout: str | None = None
    is_draft: bool | None = None
    weight: int | None = None
    data: dict[str, Any] = field(default_factory=dict)
    pagination: Pagination | None = None
    # Set by where the file is found, never read from or written to a file.
    collection: str | None = None

    @classmethod
    def empty(cls) -> Frontmatter:
        return cls()

    def merge_path(self, relpath: RelPath | str) -> Frontmatter:
        """Fill format, date, slug and title from a file's relative path."""
        path = relpath if isinstance(relpath, RelPath) else RelPath.from_unchecked(relpath)
        result = copy.deepcopy(self)
        name = path.as_str().rpartition("/")[2]
        if not name or name == "..":
            return result

        stem, ext = split_ext(name)
        if result.format is None:
            result.format = SourceFormat.MARKDOWN if ext == "md" else SourceFormat.RAW
        while ext is not None:
            stem, ext = split_ext(stem)

        if result.published_date is None or result.slug is None:
            file_date, file_stem = parse_file_stem(stem)
            if result.published_date is None:
                result.published_date = file_date
            if result.slug is None:
                slug = slugify(file_stem)
                if result.title is None:
                    result.title = titleize_slug(slug)
                result.slug = slug
        return result

    def merge(self, other: Frontmatter) -> Frontmatter:
        """Fill unset fields of this one from ``other``."""
        values: dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("data", "pagination"):
                continue
            mine = getattr(self, f.name)
            values[f.name] = copy.copy(mine if mine is not None else getattr(other, f.name))

        data = dict(self.data)
        for key, value in other.data.items():
            data.setdefault(key, copy.deepcopy(value))

        if self.pagination is None:
            pagination = copy.deepcopy(other.pagination)
        elif other.pagination is None:
            pagination = copy.deepcopy(self.pagination)
        else:
            pagination = self.pagination.merge(other.pagination)

        return Frontmatter(**values, data=data, pagination=pagination)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Frontmatter:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"frontmatter must be a mapping, got {data!r}")

        fmt = data.get("format")
        if fmt is not None:
            if not isinstance(fmt, str):
                raise ConfigError(f"`format` must be a string, got {fmt!r}")
            fmt = SourceFormat(fmt)

        extra = data.get("data")
        if extra is None:
            extra = {}
        elif not isinstance(extra, Mapping):
            raise ConfigError(f"`data` must be a mapping, got {extra!r}")

        pagination = data.get("pagination")
        if pagination is not None:
            pagination = Pagination.from_dict(pagination)

        return cls(
            permalink=_parse_permalink(data.get("permalink")),
            slug=_opt_str(data, "slug"),
            title=_opt_str(data, "title"),
            description=_opt_str(data, "description"),
            excerpt=_opt_str(data, "excerpt"),
            categories=_opt_str_list(data, "categories"),
            tags=_opt_str_list(data, "tags"),
            excerpt_separator=_opt_str(data, "excerpt_separator"),
            published_date=_opt_datetime(data, "published_date"),
            format=fmt,
            templated=_opt_bool(data, "templated"),
            layout=_opt_str(data, "layout"),
            is_draft=_opt_bool(data, "is_draft"),
            weight=_opt_i32(data, "weight"),
            data=dict(extra),
            pagination=pagination,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.permalink is not None:
            out["permalink"] = (
                self.permalink.value
                if isinstance(self.permalink, PermalinkAlias)
                else self.permalink.as_str()
            )
        for key in ("slug", "title", "description", "excerpt"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        for key in ("categories", "tags"):
            value = getattr(self, key)
            if value is not None:
                out[key] = list(value)
        if self.excerpt_separator is not None:
            out["excerpt_separator"] = self.excerpt_separator
        if self.published_date is not None:
            out["published_date"] = format_datetime(self.published_date)
        if self.format is not None:
            out["format"] = self.format.value
        for key in ("templated", "layout", "is_draft", "weight"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.data:
            out["data"] = dict(self.data)
        if self.pagination is not None:
            out["pagination"] = self.pagination.to_dict()
        return out

    def __str__(self) -> str:
        converted = self.to_dict()
        if not converted:
            return ""
        return yaml.safe_dump(
            converted, sort_keys=False, allow_unicode=True, default_flow_style=False
        ).strip()