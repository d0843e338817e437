"""Shared fixtures for card renderer tests."""

import json
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from card_ssr.api.deps import get_gateway
from card_ssr.config import Settings
from card_ssr.main import create_app
from card_ssr.services.backend import BackendGateway
from card_ssr.storage import Storage

SHELL = (
    "<!doctype html>\n"
    "<html><head><meta charset=\"utf-8\" /><title>Howtocards</title></head>"
    "<body><div id=\"root\"></div></body></html>\n"
)

CARD_PAYLOAD = {
    "title": "T",
    "description": "D",
    "id": 5,
    "createdAt": "2020-01-01",
    "updatedAt": "2020-01-02",
    "previewUrl": "img.png",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        listen_host="127.0.0.1:4000",
        public_url="https://cards.example.com/",
        image_url="https://img.example.com",
        backend_url="http://backend.local:9000",
        sitename="Howtocards",
        index_html_path="/nonexistent/index.html",
    )


@pytest.fixture
def storage() -> Storage:
    return Storage(index_html=SHELL)


def json_handler(payload, status_code: int = 200) -> Callable:
    """Mock transport handler answering every request with ``payload``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return handler


def refused_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def make_gateway(settings):
    def _make(handler: Callable) -> BackendGateway:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return BackendGateway(settings, client)

    return _make


@pytest.fixture
def make_client(settings, storage, make_gateway):
    """Build a test client whose backend answers through ``handler``."""

    def _make(handler: Callable) -> TestClient:
        app = create_app(settings, storage)
        gateway = make_gateway(handler)
        app.dependency_overrides[get_gateway] = lambda: gateway
        return TestClient(app)

    return _make
