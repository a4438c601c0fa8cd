"""Shared pytest fixtures for gateway tests."""
import json
from typing import Any, Callable, Dict, List, Union

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from keygate.core.logger import LoggerService
from keygate.core.settings import Settings
from keygate.di import container
from keygate.main import init_app
from keygate.nerdgraph.client import NerdGraphClient

GRAPHQL_URL = "https://nerdgraph.test/graphql"
API_KEY = "NRAK-TESTKEY"


class NerdGraphStub:
    """Fake NerdGraph endpoint recording every request it receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.reply: Union[httpx.Response, Callable[[httpx.Request], httpx.Response]] = (
            httpx.Response(200, json={"data": {}})
        )

    def respond_with(self, status_code: int = 200, **kwargs: Any) -> None:
        self.reply = httpx.Response(status_code, **kwargs)

    def respond_data(self, data: Dict[str, Any]) -> None:
        self.respond_with(200, json={"data": data})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.reply):
            return self.reply(request)
        return self.reply

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    @property
    def last_query(self) -> str:
        return self.last_body["query"]


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "NEW_RELIC_API_KEY": API_KEY,
        "NEW_RELIC_GRAPHQL_URL": GRAPHQL_URL,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def logger_service(settings):
    return LoggerService(settings)


@pytest.fixture
def nerdgraph():
    return NerdGraphStub()


@pytest.fixture
def nerdgraph_client(settings, logger_service, nerdgraph):
    return NerdGraphClient(
        settings, logger_service, transport=httpx.MockTransport(nerdgraph.handler)
    )


@pytest.fixture
def app_factory(nerdgraph):
    """Build a TestClient for the full app with the upstream faked."""
    clients = []

    def _build(settings: Settings) -> TestClient:
        logger_service = LoggerService(settings)
        client = NerdGraphClient(
            settings, logger_service, transport=httpx.MockTransport(nerdgraph.handler)
        )
        container.settings.override(providers.Object(settings))
        container.nerdgraph_client.override(providers.Object(client))
        test_client = TestClient(init_app())
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _build

    for test_client in clients:
        test_client.__exit__(None, None, None)
    container.settings.reset_override()
    container.nerdgraph_client.reset_override()
    container.reset_singletons()


@pytest.fixture
def client(app_factory, settings):
    return app_factory(settings)
