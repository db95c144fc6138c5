"""Configuration loading from environment variables and moltagent.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from moltagent.errors import ConfigError

_CONFIG_DIR = Path.home() / ".config" / "moltmarkets"
_DEFAULT_CREDENTIALS_PATH = _CONFIG_DIR / "credentials.json"
_DEFAULT_API_URL = "https://api.zcombinator.io/molt"
_CONFIG_FILENAME = "moltagent.toml"


@dataclass
class ApiConfig:
    """MoltMarkets API endpoint."""

    base_url: str = _DEFAULT_API_URL


@dataclass
class AgentConfig:
    """Top-level setup configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    memory_dir: Path = field(default_factory=lambda: Path.cwd() / "memory")
    credentials_path: Path = _DEFAULT_CREDENTIALS_PATH
    log_level: str = "WARNING"


def _read_toml(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(path, str(e)) from e


def load_config(config_path: Path | None = None) -> AgentConfig:
    """Load configuration from environment variables and optional moltagent.toml.

    Priority: environment variables > moltagent.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = _read_toml(config_path)
    else:
        # Search current dir and ~/.config/moltmarkets/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _CONFIG_DIR / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = _read_toml(candidate)
                break

    api_data = file_data.get("api", {})
    memory_dir = file_data.get("memory_dir", str(Path.cwd() / "memory"))
    credentials_path = file_data.get("credentials_path", str(_DEFAULT_CREDENTIALS_PATH))

    return AgentConfig(
        api=ApiConfig(
            base_url=os.getenv("MOLT_API_URL", api_data.get("base_url", _DEFAULT_API_URL)),
        ),
        memory_dir=Path(os.getenv("MOLT_MEMORY_DIR", memory_dir)).expanduser(),
        credentials_path=Path(os.getenv("MOLT_CREDENTIALS", credentials_path)).expanduser(),
        log_level=os.getenv("MOLT_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
