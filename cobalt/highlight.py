"""Rendering fenced code blocks without syntax highlighting."""

from __future__ import annotations

import os
from collections.abc import Iterator

_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "'": "&#39;",
        '"': "&quot;",
        "&": "&amp;",
    }
)


def html_escape(text: str) -> str:
    """Escape the characters that are special in HTML."""
    return text.translate(_ESCAPES)


class Raw:
    """Leaves highlighting to the browser; knows no themes or syntaxes."""

    def __init__(self) -> None:
        self._syntax_dirs: list[str] = []

    def load_custom_syntaxes(self, syntaxes_path: str | os.PathLike[str]) -> None:
        """Record the directory; raw output has no grammars to add from it."""
        self._syntax_dirs.append(os.fspath(syntaxes_path))

    def has_theme(self, name: str) -> bool:
        return name in set(self.themes())

    def themes(self) -> Iterator[str]:
        return iter(())

    def syntaxes(self) -> Iterator[str]:
        return iter(())

    def format(
        self, code: str, lang: str | None = None, theme: str | None = None
    ) -> str:
        """Wrap escaped code in ``<pre><code>``, tagging the language if known."""
        escaped = html_escape(code)
        if lang is not None:
            return f'<pre><code class="language-{lang}">{escaped}</code></pre>\n'
        return f"<pre><code>{escaped}</code></pre>\n"