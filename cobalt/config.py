"""Top-level site configuration and how it is located and loaded."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cobalt.assets import Assets
from cobalt.collection import PageCollection, PostCollection
from cobalt.errors import ConfigError
from cobalt.frontmatter import Frontmatter
from cobalt.paths import RelPath
from cobalt.site import Site

_log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "_cobalt.yml"


def _mapping(value: object, key: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"`{key}` must be a mapping, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return value


def _str_list(data: Mapping[str, Any], key: str, default: list[str]) -> list[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"`{key}` must be a list of strings, got {value!r}")
    return list(value)


def _rel_path(data: Mapping[str, Any], key: str, default: str) -> RelPath:
    value = data.get(key)
    if value is None:
        return RelPath(default)
    try:
        return RelPath.parse(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid `{key}`: {exc}") from exc


@dataclass
class SyntaxHighlight:
    """Code-block highlighting settings."""

    theme: str = "base16-ocean.dark"
    enabled: bool = True


def _syntax_from_dict(data: object) -> SyntaxHighlight:
    mapping = _mapping(data, "syntax_highlight")
    default = SyntaxHighlight()
    return SyntaxHighlight(
        theme=_str(mapping, "theme", default.theme),
        enabled=_bool(mapping, "enabled", default.enabled),
    )


@dataclass
class Minify:
    """Which output kinds get minified."""

    html: bool = False
    css: bool = False
    js: bool = False


def _minify_from_dict(data: object) -> Minify:
    mapping = _mapping(data, "minify")
    return Minify(
        html=_bool(mapping, "html", False),
        css=_bool(mapping, "css", False),
        js=_bool(mapping, "js", False),
    )


def _default_extensions() -> list[str]:
    return ["md", "wiki", "liquid"]


@dataclass
class Config:
    """Everything a ``_cobalt.yml`` file can set, plus where it was found."""

    root: Path = field(default_factory=Path)
    source: RelPath = field(default_factory=lambda: RelPath("./"))
    destination: RelPath = field(default_factory=lambda: RelPath("./_site"))
    abs_dest: Path | None = None
    include_drafts: bool = False
    default: Frontmatter = field(default_factory=Frontmatter)
    pages: PageCollection = field(default_factory=PageCollection)
    posts: PostCollection = field(default_factory=PostCollection)
    site: Site = field(default_factory=Site)
    template_extensions: list[str] = field(default_factory=_default_extensions)
    ignore: list[str] = field(default_factory=list)
    syntax_highlight: SyntaxHighlight = field(default_factory=SyntaxHighlight)
    layouts_dir: str = "_layouts"
    includes_dir: str = "_includes"
    assets: Assets = field(default_factory=Assets)
    minify: Minify = field(default_factory=Minify)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Config:
        """Load a config file; its directory becomes the root."""
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read config: {exc}", path) from exc

        if not content.strip():
            config = cls()
        else:
            try:
                config = cls.from_dict(yaml.safe_load(content))
            except yaml.YAMLError as exc:
                raise ConfigError(f"Failed to parse config: {exc}", path) from exc
            except ConfigError as exc:
                raise ConfigError(f"Failed to parse config: {exc.message}", path) from exc

        config.root = path.parent
        return config

    @classmethod
    def from_cwd(cls, cwd: str | os.PathLike[str]) -> Config:
        """Load the nearest ``_cobalt.yml`` at or above ``cwd``, else defaults."""
        file_path = find_project_file(cwd, CONFIG_FILE_NAME)
        if file_path is not None:
            _log.debug("Using config file `%s`", file_path)
            return cls.from_file(file_path)
        _log.warning(
            "No _cobalt.yml file found in current directory, using default config."
        )
        return cls(root=Path(cwd))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Config:
        """Build a config from parsed YAML; unknown keys are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"config must be a mapping, got {data!r}")
        return cls(
            source=_rel_path(data, "source", "./"),
            destination=_rel_path(data, "destination", "./_site"),
            include_drafts=_bool(data, "include_drafts", False),
            default=Frontmatter.from_dict(data.get("default")),
            pages=PageCollection.from_dict(data.get("pages")),
            posts=PostCollection.from_dict(data.get("posts")),
            site=Site.from_dict(data.get("site")),
            template_extensions=_str_list(
                data, "template_extensions", _default_extensions()
            ),
            ignore=_str_list(data, "ignore", []),
            syntax_highlight=_syntax_from_dict(data.get("syntax_highlight")),
            assets=Assets.from_dict(data.get("assets")),
            minify=_minify_from_dict(data.get("minify")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.as_str(),
            "destination": self.destination.as_str(),
            "include_drafts": self.include_drafts,
            "default": self.default.to_dict(),
            "pages": self.pages.to_dict(),
            "posts": self.posts.to_dict(),
            "site": self.site.to_dict(),
            "template_extensions": list(self.template_extensions),
            "ignore": list(self.ignore),
            "syntax_highlight": {
                "theme": self.syntax_highlight.theme,
                "enabled": self.syntax_highlight.enabled,
            },
            "assets": self.assets.to_dict(),
            "minify": {
                "html": self.minify.html,
                "css": self.minify.css,
                "js": self.minify.js,
            },
        }

    def __str__(self) -> str:
        return yaml.safe_dump(
            self.to_dict(), sort_keys=False, allow_unicode=True, default_flow_style=False
        )


def find_project_file(directory: str | os.PathLike[str], name: str) -> Path | None:
    """Find ``name`` in ``directory`` or the nearest ancestor holding it."""
    start = Path(directory)
    for candidate_dir in (start, *start.parents):
        candidate = candidate_dir / name
        if candidate.exists():
            return candidate
    return None