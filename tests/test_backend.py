"""Tests for the backend gateway."""

import json

import httpx
import pytest

from card_ssr.exceptions import BackendRejected, DecodeError, TransportError

from tests.conftest import CARD_PAYLOAD, json_handler, refused_handler


@pytest.mark.asyncio
async def test_fetch_card_meta_requests_meta_endpoint(make_gateway):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = {"ok": True, "result": {"meta": CARD_PAYLOAD}}
        return httpx.Response(200, content=json.dumps(body).encode())

    gateway = make_gateway(handler)
    card = await gateway.fetch_card_meta(5)

    assert card.title == "T"
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "http://backend.local:9000/api/cards/5/meta/"


@pytest.mark.asyncio
async def test_error_envelope_is_rejected(make_gateway):
    gateway = make_gateway(json_handler({"ok": False, "error": "not found"}, 404))

    with pytest.raises(BackendRejected) as exc_info:
        await gateway.fetch_card_meta(5)

    assert exc_info.value.message == "not found"


@pytest.mark.asyncio
async def test_success_shape_with_false_flag_is_rejected(make_gateway):
    gateway = make_gateway(
        json_handler({"ok": False, "result": {"meta": CARD_PAYLOAD}})
    )

    with pytest.raises(BackendRejected):
        await gateway.fetch_card_meta(5)


@pytest.mark.asyncio
async def test_connection_refused_is_transport_error(make_gateway):
    gateway = make_gateway(refused_handler)

    with pytest.raises(TransportError):
        await gateway.fetch_card_meta(5)


@pytest.mark.asyncio
async def test_timeout_is_transport_error(make_gateway):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    gateway = make_gateway(handler)

    with pytest.raises(TransportError):
        await gateway.fetch_card_meta(5)


@pytest.mark.asyncio
async def test_non_json_body_is_decode_error(make_gateway):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, content=b"<html>Bad Gateway</html>")

    gateway = make_gateway(handler)

    with pytest.raises(DecodeError):
        await gateway.fetch_card_meta(5)
