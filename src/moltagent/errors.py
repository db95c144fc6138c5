"""Setup failures. Every one of them is fatal to the setup run."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SetupError(Exception):
    """Base class for errors that abort setup."""


class ConfigError(SetupError):
    """moltagent.toml could not be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"Invalid config file {path}: {detail}")


class MissingCredentials(SetupError):
    """The credentials file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Missing credentials file: {path}")


class MalformedJSON(SetupError):
    """A credentials file or API response could not be parsed."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        super().__init__(f"Malformed JSON in {source}: {detail}")


class ApiRejected(SetupError):
    """The API answered with a non-200 status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"API returned {status}: {body}")


class TransportError(SetupError):
    """The request never got an HTTP answer (DNS, TLS, connection reset)."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Request failed: {cause}")
