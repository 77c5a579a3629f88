"""Errors raised while loading or validating site configuration."""

from __future__ import annotations

import os


class ConfigError(Exception):
    """A configuration file or value could not be read or understood."""

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = None if path is None else os.fspath(path)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}\n  Path: {self.path}"