from typing import Any, Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Request
from graphql_web.core.web_input import WebInput
from graphql_web.core.web_output import WebOutput
from graphql_web.examples.hello import schema as hello_schema
from graphql_web.settings import Settings

ENV_VARS = ["GRAPHQL_PATH", "GRAPHQL_SCHEMA", "INTERCEPTORS_FILEPATH"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """AUTOUSE: keep settings read by the app independent of the developer's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def schema():
    return hello_schema


@pytest.fixture
def mock_settings() -> MagicMock:
    """Provides a mock Settings instance pointing at the example schema."""
    settings = MagicMock(spec=Settings)
    settings.get_graphql_path.return_value = "/graphql"
    settings.get_schema_import_path.return_value = "graphql_web.examples.hello:schema"
    settings.get_interceptors_filepath.return_value = None
    return settings


@pytest.fixture
def mock_execute() -> AsyncMock:
    """A stand-in for the execution chain, returning a fixed output."""
    return AsyncMock(return_value=WebOutput(data={"hello": "world"}))


@pytest.fixture
def web_input() -> WebInput:
    return WebInput(
        uri="http://testserver/graphql",
        headers={"content-type": ["application/json"], "x-tenant-id": ["acme"]},
        body={"query": "{ hello }"},
    )


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for Starlette requests with a given body, headers and receive behaviour."""

    def _make_request(
        body: bytes = b'{"query": "{ hello }"}',
        content_type: Optional[str] = "application/json",
        headers: Optional[list[tuple[str, str]]] = None,
        receive: Optional[Callable[[], Any]] = None,
    ) -> Request:
        raw_headers = []
        if content_type is not None:
            raw_headers.append((b"content-type", content_type.encode("latin-1")))
        for name, value in headers or []:
            raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

        async def default_receive():
            return {"type": "http.request", "body": body, "more_body": False}

        scope = {
            "type": "http",
            "http_version": "1.1",
            "method": "POST",
            "scheme": "http",
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 50000),
            "path": "/graphql",
            "root_path": "",
            "query_string": b"",
            "headers": raw_headers,
        }
        return Request(scope, receive or default_receive)

    return _make_request
