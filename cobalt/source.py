"""Walking a site's source tree, honouring gitignore-style ignore entries."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath

from cobalt.errors import ConfigError
from cobalt.paths import RelPath

_log = logging.getLogger(__name__)


@dataclass
class SourcePath:
    """A file known by both its absolute and its root-relative path."""

    abs_path: Path
    rel_path: RelPath

    @classmethod
    def from_root(
        cls, root: str | os.PathLike[str], path: str | os.PathLike[str]
    ) -> SourcePath | None:
        """Pair ``path`` with its path below ``root``, or None if not below it."""
        abs_path = Path(path)
        try:
            relative = PurePath(abs_path).relative_to(PurePath(root))
        except ValueError:
            return None
        rel_path = RelPath.from_path(relative)
        if rel_path is None:
            return None
        return cls(abs_path, rel_path)

    def pop(self) -> bool:
        """Drop the last component of both paths; False if nothing to drop."""
        parent = self.abs_path.parent
        abs_popped = parent != self.abs_path
        rel = self.rel_path.as_str()
        rel_popped = bool(rel)
        if abs_popped != rel_popped:
            raise RuntimeError(
                f"Paths out of step: {self.abs_path} and {self.rel_path!r}"
            )
        if abs_popped:
            self.abs_path = parent
            self.rel_path = RelPath(rel.rpartition("/")[0])
        return abs_popped

    def push(self, name: str) -> None:
        """Append a component to both paths."""
        self.abs_path = self.abs_path / name
        self.rel_path = RelPath(PurePosixPath(self.rel_path.as_str(), name))


class _Match(Enum):
    NONE = "none"
    IGNORE = "ignore"
    WHITELIST = "whitelist"


@dataclass(frozen=True)
class _Rule:
    original: str
    regex: re.Pattern[str]
    negated: bool
    dir_only: bool


def _char_class(glob: str, start: int, original: str) -> tuple[str, int]:
    i = start + 1
    negate = False
    if i < len(glob) and glob[i] in "!^":
        negate = True
        i += 1
    body_start = i
    if i < len(glob) and glob[i] == "]":
        i += 1
    while i < len(glob) and glob[i] != "]":
        i += 1
    if i >= len(glob):
        raise ConfigError(f"Invalid ignore entry: unclosed character class in {original!r}")
    body = glob[body_start:i]
    escaped = "".join(ch if ch == "-" else re.escape(ch) for ch in body)
    return f"[{'^' if negate else ''}{escaped}]", i + 1


def _translate(glob: str, original: str) -> re.Pattern[str]:
    out: list[str] = []
    n = len(glob)
    i = 0
    while i < n:
        ch = glob[i]
        if ch == "*":
            if glob.startswith("**", i):
                end = i + 2
                at_start = i == 0 or glob[i - 1] == "/"
                at_end = end == n or glob[end] == "/"
                if at_start and at_end:
                    if end == n:
                        out.append(".*")
                        i = end
                    else:
                        out.append("(?:.*/)?")
                        i = end + 1
                    continue
                out.append("[^/]*")
                i = end
                continue
            out.append("[^/]*")
            i += 1
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "[":
            pattern, i = _char_class(glob, i, original)
            out.append(pattern)
        elif ch == "\\":
            if i + 1 >= n:
                raise ConfigError(f"Invalid ignore entry: dangling escape in {original!r}")
            out.append(re.escape(glob[i + 1]))
            i += 2
        else:
            out.append(re.escape(ch))
            i += 1
    return re.compile("".join(out))


def _parse_rule(line: str) -> _Rule | None:
    original = line
    if not line.endswith("\\ "):
        line = line.rstrip()
    if not line or line.startswith("#"):
        return None

    negated = False
    anchored = False
    if line.startswith(("\\!", "\\#")):
        line = line[1:]
    else:
        if line.startswith("!"):
            negated = True
            line = line[1:]
        if line.startswith("/"):
            line = line[1:]
            anchored = True

    dir_only = False
    if line.endswith("/"):
        dir_only = True
        line = line[:-1]
    if not line:
        return None

    if not anchored and "/" not in line and not line.startswith("**/"):
        line = f"**/{line}"
    return _Rule(original, _translate(line, original), negated, dir_only)


class Source:
    """The files under a root directory that the ignore entries leave in."""

    def __init__(self, root: str | os.PathLike[str], ignores: Iterable[str] = ()) -> None:
        self._root = Path(root)
        self._rules = [rule for rule in map(_parse_rule, ignores) if rule is not None]

    @property
    def root(self) -> Path:
        return self._root

    def includes_file(self, file: str | os.PathLike[str]) -> bool:
        return self._includes_path(Path(file), is_dir=False)

    def includes_dir(self, directory: str | os.PathLike[str]) -> bool:
        return self._includes_path(Path(directory), is_dir=True)

    def __iter__(self) -> Iterator[SourcePath]:
        """Every included file, depth first, sorted by name within a directory."""
        return self._walk(self._root)

    def _walk(self, directory: Path) -> Iterator[SourcePath]:
        try:
            with os.scandir(directory) as entries:
                ordered = sorted(entries, key=lambda entry: entry.name)
        except OSError:
            return
        for entry in ordered:
            path = Path(entry.path)
            is_dir = entry.is_dir(follow_symlinks=False)
            if not self._includes_path_leaf(path, is_dir):
                continue
            if is_dir:
                yield from self._walk(path)
            elif entry.is_file(follow_symlinks=False):
                source_path = SourcePath.from_root(self._root, path)
                if source_path is not None:
                    yield source_path

    def _relative_parts(self, path: Path) -> list[str] | None:
        pure = PurePath(path)
        try:
            return list(pure.relative_to(PurePath(self._root)).parts)
        except ValueError:
            if pure.anchor:
                return None
            return list(pure.parts)

    def _matched(self, parts: list[str], is_dir: bool) -> tuple[_Match, _Rule | None]:
        if not parts:
            return _Match.NONE, None
        rel = "/".join(parts)
        for rule in reversed(self._rules):
            if rule.dir_only and not is_dir:
                continue
            if rule.regex.fullmatch(rel):
                return (_Match.WHITELIST if rule.negated else _Match.IGNORE), rule
        return _Match.NONE, None

    def _decide(self, path: Path, match: _Match, rule: _Rule | None) -> bool:
        if match is _Match.IGNORE:
            _log.debug("%s: ignored %r", path, rule.original if rule else None)
            return False
        if match is _Match.WHITELIST:
            _log.debug("%s: allowed %r", path, rule.original if rule else None)
        return True

    def _includes_path(self, path: Path, is_dir: bool) -> bool:
        parts = self._relative_parts(path)
        if parts is None:
            raise ValueError(f"{path} is not under the root {self._root}")
        match, rule = self._matched(parts, is_dir)
        depth = len(parts) - 1
        while match is _Match.NONE and depth > 0:
            match, rule = self._matched(parts[:depth], True)
            depth -= 1
        return self._decide(path, match, rule)

    def _includes_path_leaf(self, path: Path, is_dir: bool) -> bool:
        parts = self._relative_parts(path) or []
        match, rule = self._matched(parts, is_dir)
        return self._decide(path, match, rule)