"""Site-wide settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cobalt.errors import ConfigError
from cobalt.paths import RelPath


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return value


@dataclass
class Site:
    """Title, base URL, sitemap location and global data of a site."""

    title: str | None = None
    description: str | None = None
    base_url: str | None = None
    sitemap: RelPath | None = None
    data: dict[str, Any] | None = None
    data_dir: str = "_data"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Site:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"site must be a mapping, got {data!r}")

        sitemap = data.get("sitemap")
        if sitemap is not None:
            try:
                sitemap = RelPath.parse(sitemap)
            except ValueError as exc:
                raise ConfigError(f"Invalid `sitemap`: {exc}") from exc

        extra = data.get("data")
        if extra is not None:
            if not isinstance(extra, Mapping):
                raise ConfigError(f"`data` must be a mapping, got {extra!r}")
            extra = dict(extra)

        return cls(
            title=_optional_str(data, "title"),
            description=_optional_str(data, "description"),
            base_url=_optional_str(data, "base_url"),
            sitemap=sitemap,
            data=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "base_url": self.base_url,
            "sitemap": None if self.sitemap is None else self.sitemap.as_str(),
            "data": None if self.data is None else dict(self.data),
        }