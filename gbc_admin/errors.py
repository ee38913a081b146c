"""Exception hierarchy for gbc-admin.

Menu resolution failures are ``ConfigError`` (or one of its file-level
subclasses); scaffolding failures are ``ArgumentError``.  Every error carries
enough context to fix the offending YAML or command line without reading the
source.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class GbcAdminError(Exception):
    """Base class for every error raised by gbc-admin."""


class ConfigError(GbcAdminError):
    """Raised when the menu configuration is missing, malformed or invalid.

    Attributes:
        key: The offending key, if the error is about a specific key.
        available: Valid keys at the level of the failed lookup (sorted).
        source: The file the configuration was read from, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        available: Iterable[str] | None = None,
        source: str | Path | None = None,
    ) -> None:
        self.message = message
        self.key = key
        self.available = sorted(str(k) for k in available) if available is not None else []
        self.source = Path(source) if source is not None else None
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.available:
            text += f" (available: {', '.join(self.available)})"
        if self.source is not None:
            text += f" [{self.source}]"
        return text

    def with_source(self, source: str | Path) -> "ConfigError":
        """Return a copy of this error that names *source*.

        Errors raised by the resolver don't know which file the mapping came
        from; the helper and the CLI attach it before re-raising.
        """
        return type(self)(
            self.message, key=self.key, available=self.available, source=source
        )


class MenuFileNotFoundError(ConfigError):
    """The menu file does not exist."""


class MenuParseError(ConfigError):
    """The menu file exists but is not valid YAML."""


class ArgumentError(GbcAdminError, ValueError):
    """Raised when the scaffolder receives an unusable argument."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"{argument}: {message}")
