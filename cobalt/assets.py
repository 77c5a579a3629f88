"""Settings for processing static assets."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from cobalt.errors import ConfigError


class SassOutputStyle(Enum):
    NESTED = "Nested"
    EXPANDED = "Expanded"
    COMPACT = "Compact"
    COMPRESSED = "Compressed"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls.UNKNOWN
        return None


@dataclass
class Sass:
    """Sass compilation settings."""

    import_dir: str = "_sass"
    style: SassOutputStyle = SassOutputStyle.NESTED


def _mapping(value: object, key: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"`{key}` must be a mapping, got {value!r}")
    return value


@dataclass
class Assets:
    """Asset pipeline settings."""

    sass: Sass = field(default_factory=Sass)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Assets:
        sass_data = _mapping(_mapping(data, "assets").get("sass"), "sass")
        style = sass_data.get("style")
        if style is None:
            return cls(sass=Sass())
        if not isinstance(style, str):
            raise ConfigError(f"`style` must be a string, got {style!r}")
        return cls(sass=Sass(style=SassOutputStyle(style)))

    def to_dict(self) -> dict[str, Any]:
        return {"sass": {"style": self.sass.style.value}}