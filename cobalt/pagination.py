"""Pagination settings and the sort orders shared with collections."""

from __future__ import annotations

import copy
import functools
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from cobalt.errors import ConfigError

DEFAULT_PER_PAGE = 10
DEFAULT_PERMALINK = "{{num}}/"
DEFAULT_SORT = "published_date"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class _LenientEnum(Enum):
    """Unrecognised names map to the ``UNKNOWN`` member."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls["UNKNOWN"]
        return None


class SortOrder(_LenientEnum):
    NONE = "None"
    ASC = "Asc"
    DESC = "Desc"
    UNKNOWN = "Unknown"


class Include(_LenientEnum):
    NONE = "None"
    ALL = "All"
    TAGS = "Tags"
    CATEGORIES = "Categories"
    DATES = "Dates"
    UNKNOWN = "Unknown"


@functools.total_ordering
class DateIndex(_LenientEnum):
    YEAR = "Year"
    MONTH = "Month"
    DAY = "Day"
    HOUR = "Hour"
    MINUTE = "Minute"
    UNKNOWN = "Unknown"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateIndex):
            return NotImplemented
        members = list(DateIndex)
        return members.index(self) < members.index(other)


def _enum(cls: type[Enum], value: object, key: str) -> Any:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return cls(value)


def _str_list(value: object, key: str) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"`{key}` must be a list of strings, got {value!r}")
    return list(value)


@dataclass
class Pagination:
    """How a page splits a collection into numbered pages."""

    include: Include | None = None
    per_page: int | None = None
    permalink_suffix: str | None = None
    order: SortOrder | None = None
    sort_by: list[str] | None = None
    date_index: list[DateIndex] | None = None

    @classmethod
    def empty(cls) -> Pagination:
        return cls()

    @classmethod
    def with_defaults(cls) -> Pagination:
        return cls(
            include=Include.NONE,
            per_page=DEFAULT_PER_PAGE,
            permalink_suffix=DEFAULT_PERMALINK,
            order=SortOrder.DESC,
            sort_by=[DEFAULT_SORT],
            date_index=[DateIndex.YEAR, DateIndex.MONTH],
        )

    def merge(self, other: Pagination) -> Pagination:
        """Fill unset fields of this one from ``other``."""
        merged = {}
        for f in fields(self):
            mine = getattr(self, f.name)
            chosen = mine if mine is not None else getattr(other, f.name)
            merged[f.name] = copy.copy(chosen)
        return Pagination(**merged)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Pagination:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"pagination must be a mapping, got {data!r}")

        per_page = data.get("per_page")
        if per_page is not None and (
            isinstance(per_page, bool)
            or not isinstance(per_page, int)
            or not _I32_MIN <= per_page <= _I32_MAX
        ):
            raise ConfigError(f"`per_page` must be an integer, got {per_page!r}")

        permalink_suffix = data.get("permalink_suffix")
        if permalink_suffix is not None and not isinstance(permalink_suffix, str):
            raise ConfigError(
                f"`permalink_suffix` must be a string, got {permalink_suffix!r}"
            )

        date_names = _str_list(data.get("date_index"), "date_index")
        return cls(
            include=_enum(Include, data.get("include"), "include"),
            per_page=per_page,
            permalink_suffix=permalink_suffix,
            order=_enum(SortOrder, data.get("order"), "order"),
            sort_by=_str_list(data.get("sort_by"), "sort_by"),
            date_index=None if date_names is None else [DateIndex(n) for n in date_names],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.include is not None:
            out["include"] = self.include.value
        if self.per_page is not None:
            out["per_page"] = self.per_page
        if self.permalink_suffix is not None:
            out["permalink_suffix"] = self.permalink_suffix
        if self.order is not None:
            out["order"] = self.order.value
        if self.sort_by is not None:
            out["sort_by"] = list(self.sort_by)
        if self.date_index is not None:
            out["date_index"] = [index.value for index in self.date_index]
        return out