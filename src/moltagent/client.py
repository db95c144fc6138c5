"""MoltMarkets API client: just enough to validate an API key.

Requires: aiohttp
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import aiohttp

from moltagent.errors import ApiRejected, MalformedJSON, TransportError

if TYPE_CHECKING:
    from moltagent.credentials import Credentials

logger = logging.getLogger(__name__)


@dataclass
class UserRecord:
    """The authenticated user as returned by GET /me."""

    balance: Any
    raw: dict = field(default_factory=dict)


class MoltMarketsClient:
    """Authenticated client for the MoltMarkets HTTP API."""

    def __init__(self, credentials: Credentials, base_url: str) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")

    @property
    def me_url(self) -> str:
        return f"{self._base_url}/me"

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._credentials.api_key}"}

    async def get_me(self) -> UserRecord:
        """Fetch the current user. One request, no retries."""
        logger.debug("GET %s", self.me_url)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.me_url, headers=self._headers()) as resp:
                    status = resp.status
                    body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(e) from e

        logger.debug("GET %s -> %d (%d bytes)", self.me_url, status, len(body))
        if status != 200:
            raise ApiRejected(status, body.decode("utf-8", errors="replace"))
        return self._parse_user(body)

    @staticmethod
    def _parse_user(body: bytes) -> UserRecord:
        try:
            data = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedJSON("API response", str(e)) from e

        if not isinstance(data, dict) or "balance" not in data:
            raise MalformedJSON("API response", "no 'balance' field")
        return UserRecord(balance=data["balance"], raw=data)
