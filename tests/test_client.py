"""Tests for the MoltMarkets API client (local aiohttp test server)."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager

import aiohttp
import pytest
from aiohttp import test_utils, web
from unittest.mock import patch

from moltagent.client import MoltMarketsClient, UserRecord
from moltagent.credentials import Credentials
from moltagent.errors import ApiRejected, MalformedJSON, SetupError, TransportError

CREDS = Credentials(api_key="mm_test", user_id="u1", username="alice")


@asynccontextmanager
async def fake_api(status: int = 200, body: str | bytes = '{"balance": 120}'):
    """Serve GET /molt/me with a canned response; yields (base_url, requests)."""
    requests: list[web.Request] = []

    async def handle_me(request: web.Request) -> web.Response:
        requests.append(request)
        payload = body if isinstance(body, bytes) else body.encode()
        return web.Response(status=status, body=payload, content_type="application/json")

    app = web.Application()
    app.router.add_get("/molt/me", handle_me)
    server = test_utils.TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/molt")), requests
    finally:
        await server.close()


class TestGetMe:
    @pytest.mark.asyncio
    async def test_success(self):
        async with fake_api(body='{"balance": 120, "username": "alice"}') as (url, requests):
            user = await MoltMarketsClient(CREDS, url).get_me()

        assert isinstance(user, UserRecord)
        assert user.balance == 120
        assert user.raw["username"] == "alice"
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_sends_bearer_token(self):
        async with fake_api() as (url, requests):
            await MoltMarketsClient(CREDS, url).get_me()

        assert requests[0].method == "GET"
        assert requests[0].path == "/molt/me"
        assert requests[0].headers["Authorization"] == "Bearer mm_test"

    @pytest.mark.asyncio
    async def test_trailing_slash_in_base_url(self):
        async with fake_api() as (url, requests):
            await MoltMarketsClient(CREDS, url + "/").get_me()
        assert requests[0].path == "/molt/me"

    @pytest.mark.asyncio
    async def test_non_200_rejected(self):
        async with fake_api(status=401, body='{"error":"invalid key"}') as (url, requests):
            with pytest.raises(ApiRejected) as exc_info:
                await MoltMarketsClient(CREDS, url).get_me()

        assert exc_info.value.status == 401
        assert exc_info.value.body == '{"error":"invalid key"}'
        assert str(exc_info.value) == 'API returned 401: {"error":"invalid key"}'
        assert len(requests) == 1  # no retries

    @pytest.mark.asyncio
    async def test_server_error_not_retried(self):
        async with fake_api(status=503, body="down") as (url, requests):
            with pytest.raises(ApiRejected):
                await MoltMarketsClient(CREDS, url).get_me()
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_rejected_body_not_utf8(self):
        async with fake_api(status=401, body=b"\xff\xfe bad") as (url, _):
            with pytest.raises(ApiRejected) as exc_info:
                await MoltMarketsClient(CREDS, url).get_me()

        assert isinstance(exc_info.value, SetupError)
        assert exc_info.value.status == 401
        assert exc_info.value.body == "\ufffd\ufffd bad"

    @pytest.mark.asyncio
    async def test_success_body_not_utf8(self):
        async with fake_api(body=b"\xff\xfe") as (url, _):
            with pytest.raises(MalformedJSON):
                await MoltMarketsClient(CREDS, url).get_me()

    @pytest.mark.asyncio
    async def test_body_not_json(self):
        async with fake_api(body="<html>oops</html>") as (url, _):
            with pytest.raises(MalformedJSON):
                await MoltMarketsClient(CREDS, url).get_me()

    @pytest.mark.asyncio
    async def test_body_without_balance(self):
        async with fake_api(body=json.dumps({"username": "alice"})) as (url, _):
            with pytest.raises(MalformedJSON):
                await MoltMarketsClient(CREDS, url).get_me()

    @pytest.mark.asyncio
    async def test_transport_error(self):
        error = aiohttp.ClientConnectionError("connection reset")
        with patch("moltagent.client.aiohttp.ClientSession.get", side_effect=error):
            with pytest.raises(TransportError) as exc_info:
                await MoltMarketsClient(CREDS, "https://api.example.invalid/molt").get_me()

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
