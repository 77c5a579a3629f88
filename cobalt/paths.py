"""Slugs, file-stem parsing and normalised project-relative paths."""

from __future__ import annotations

import functools
import os
import re
from datetime import datetime
from pathlib import Path, PurePath

from unidecode import unidecode

from cobalt.timestamp import from_ymd

_SLUG_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9]+")
_DATE_PREFIX = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})[- ](.*)")


def slugify(name: str) -> str:
    """Create a URL slug for a name, transliterating non-ASCII text."""
    ascii_name = unidecode(name, errors="replace", replace_str="-")
    return _SLUG_INVALID_CHARS.sub("-", ascii_name).strip("-").lower()


def _title_case(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def titleize_slug(slug: str) -> str:
    """Format a user-visible title out of a slug."""
    return " ".join(_title_case(word) for word in slug.split("-"))


def split_ext(name: str) -> tuple[str, str | None]:
    """Split off the last extension of a file name."""
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, None
    return stem, ext


def parse_file_stem(stem: str) -> tuple[datetime | None, str]:
    """Split a leading ``YYYY-MM-DD`` date off a file stem.

    Raises ValueError when the prefix looks like a date but is not one.
    """
    match = _DATE_PREFIX.fullmatch(stem)
    if match is None:
        return None, stem
    year, month, day, rest = match.groups()
    return from_ymd(int(year), int(month), int(day)), rest


def _components(value: str | os.PathLike[str] | bytes) -> list[str]:
    raw = os.fspath(value)
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    pure = PurePath(raw)
    return list(pure.parts[1:] if pure.anchor else pure.parts)


def _normalize(parts: list[str]) -> list[str]:
    out: list[str] = []
    for part in parts:
        if part in ("", "."):
            continue
        if part == "..":
            if out and out[-1] != "..":
                out.pop()
            else:
                out.append("..")
            continue
        out.append(part)
    return out


@functools.total_ordering
class RelPath:
    """A normalised path relative to the project root, ``/``-separated."""

    __slots__ = ("_parts",)

    def __init__(self, value: str | os.PathLike[str] = "") -> None:
        self._parts = tuple(_normalize(_components(value)))

    @classmethod
    def parse(cls, value: str | os.PathLike[str] | RelPath) -> RelPath:
        """Build a path, rejecting absolute ones with ValueError."""
        if isinstance(value, RelPath):
            return value
        if not isinstance(value, (str, os.PathLike)):
            raise ValueError(f"Expected a path, got {value!r}")
        if PurePath(os.fspath(value)).anchor:
            raise ValueError("Absolute paths are not supported")
        return cls(value)

    @classmethod
    def from_path(cls, value: str | os.PathLike[str] | bytes) -> RelPath | None:
        """Build a path, or None when it is not valid text."""
        try:
            return cls(value)
        except UnicodeDecodeError:
            return None

    @classmethod
    def from_unchecked(cls, value: str | os.PathLike[str] | bytes) -> RelPath:
        """Build a path, raising ValueError when it is not valid text."""
        path = cls.from_path(value)
        if path is None:
            raise ValueError(f"Path is not valid text: {value!r}")
        return path

    def as_str(self) -> str:
        return "/".join(self._parts)

    def as_path(self) -> Path:
        return Path(self.as_str())

    def to_path(self, root: str | os.PathLike[str]) -> Path:
        """Join this path onto a filesystem root."""
        return Path(root, *self._parts)

    def starts_with(self, other: RelPath | str | os.PathLike[str]) -> bool:
        """Whether ``other`` is a component-wise prefix of this path."""
        prefix = other if isinstance(other, RelPath) else RelPath.from_unchecked(other)
        return self._parts[: len(prefix._parts)] == prefix._parts

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RelPath):
            return self._parts == other._parts
        if isinstance(other, (str, os.PathLike)):
            converted = RelPath.from_path(other)
            return converted is not None and self._parts == converted._parts
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RelPath):
            return NotImplemented
        return self._parts < other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"RelPath({self.as_str()!r})"