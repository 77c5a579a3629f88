"""Documents made of an optional frontmatter block and a body."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import yaml

from cobalt.errors import ConfigError
from cobalt.frontmatter import Frontmatter

_log = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(r"\A---\s*\r?\n([\s\S]*\n)?---\s*\r?\n")
_FRONT_MATTER_DIVIDE = re.compile(r"---\s*\r?\n")
_DEPRECATED_DIVIDE = re.compile(r"(?:\A|\n)---\s*\r?\n")


def _deprecated_split(content: str) -> tuple[str | None, str]:
    if _DEPRECATED_DIVIDE.search(content) is None:
        return None, content
    _log.warning(
        "Trailing separators are deprecated. We recommend frontmatters be "
        "surrounded, above and below, with ---"
    )
    pieces = _DEPRECATED_DIVIDE.split(content, maxsplit=1)
    front = pieces[0]
    body = pieces[1] if len(pieces) > 1 else ""
    return (front or None), body


def split_document(content: str) -> tuple[str | None, str]:
    """Split text into its frontmatter (None if absent or empty) and body."""
    if _FRONT_MATTER.match(content) is None:
        return _deprecated_split(content)
    pieces = _FRONT_MATTER_DIVIDE.split(content, maxsplit=2)[1:]
    front = pieces[0] if pieces else ""
    body = pieces[1] if len(pieces) > 1 else ""
    return (front or None), body


def _parse_frontmatter(text: str) -> Frontmatter:
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse frontmatter: {exc}") from exc
    try:
        return Frontmatter.from_dict(loaded)
    except ConfigError as exc:
        raise ConfigError(f"Failed to parse frontmatter: {exc.message}") from exc


@dataclass
class Document:
    """A frontmatter and the body text that follows it."""

    front: Frontmatter = field(default_factory=Frontmatter)
    content: str = ""

    @classmethod
    def parse(cls, content: str) -> Document:
        """Parse text; raises ConfigError on invalid frontmatter."""
        front_text, body = split_document(content)
        front = Frontmatter() if front_text is None else _parse_frontmatter(front_text)
        return cls(front, body)

    def into_parts(self) -> tuple[Frontmatter, str]:
        return self.front, self.content

    def __str__(self) -> str:
        front = str(self.front)
        if not front:
            return self.content
        return f"---\n{front}\n---\n{self.content}"