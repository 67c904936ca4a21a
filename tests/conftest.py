"""Shared fixtures: a fake fact service and a TestClient wired to it."""

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app, get_fact_client
from bot.tools.fact_lookup import FactClient
from config.settings import Settings


FACT_TEXT = "Snails can sleep for up to three years."


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def seen_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def fact_handler(seen_requests) -> Callable[[httpx.Request], httpx.Response]:
    """Default fake fact service: records the request, answers with one fact."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen_requests.append(request)
        return httpx.Response(200, json={"_id": "abc", "text": FACT_TEXT, "type": "snail"})

    return handler


@pytest.fixture
def fact_client(settings, fact_handler) -> FactClient:
    client = FactClient.from_settings(settings, transport=httpx.MockTransport(fact_handler))
    yield client
    client.close()


@pytest.fixture
def client(fact_client) -> TestClient:
    app.dependency_overrides[get_fact_client] = lambda: fact_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
