"""Loading the agent's MoltMarkets API credentials."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from moltagent.errors import MalformedJSON, MissingCredentials

logger = logging.getLogger(__name__)

CREDENTIALS_EXAMPLE = '{ "api_key": "mm_xxx", "user_id": "uuid", "username": "xxx" }'


@dataclass(frozen=True)
class Credentials:
    """API key plus the identity it belongs to."""

    api_key: str
    user_id: str = ""
    username: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Credentials:
        return cls(
            api_key=str(data.get("api_key", "")),
            user_id=str(data.get("user_id", "")),
            username=str(data.get("username", "")),
        )


def load_credentials(path: Path) -> Credentials:
    """Read the credentials file at *path*.

    Raises MissingCredentials if the file is absent and MalformedJSON if it
    does not parse. Keys are not validated beyond that.
    """
    if not path.exists():
        raise MissingCredentials(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedJSON(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise MalformedJSON(str(path), "expected a JSON object")

    logger.debug("Loaded credentials from %s", path)
    return Credentials.from_dict(data)
