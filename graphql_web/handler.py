"""GraphQL handler exposed as a FastAPI endpoint by `graphql_web.server`."""

import json
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from fastapi import Request, status
from fastapi.responses import JSONResponse
from graphql import GraphQLSchema
from starlette.requests import ClientDisconnect

from graphql_web.core.web_input import Headers, WebInput
from graphql_web.core.web_output import WebOutput
from graphql_web.exceptions import InputError, MediaTypeError
from graphql_web.interceptors.execution_chain import WebInterceptorExecutionChain
from graphql_web.interceptors.web_interceptor import WebInterceptor

logger = logging.getLogger(__name__)

SUPPORTED_MEDIA_TYPES = ["application/json", "application/*+json"]

ExecuteFn = Callable[[WebInput], Awaitable[WebOutput]]


def _charset(content_type: str) -> Optional[str]:
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return None


def _is_supported_media_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    main_type, _, subtype = media_type.partition("/")
    return main_type == "application" and subtype.endswith("+json")


async def read_body(request: Request) -> dict[str, Any]:
    """
    Reads the request body as a JSON object.

    Raises:
        MediaTypeError: If the request's content type is not JSON.
        InputError: If the body cannot be read, is not valid JSON, or is not a JSON object.
    """
    content_type = request.headers.get("content-type")
    if not _is_supported_media_type(content_type):
        raise MediaTypeError(content_type, SUPPORTED_MEDIA_TYPES)

    try:
        raw_body = await request.body()
    except (OSError, ClientDisconnect) as e:
        raise InputError("I/O error while reading request body") from e

    charset = _charset(content_type)
    try:
        body = json.loads(raw_body.decode(charset) if charset else raw_body)
    except LookupError as e:
        raise InputError(f"Unsupported request charset: '{charset}'") from e
    except ValueError as e:
        raise InputError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise InputError(f"Request body must be a JSON object, got {type(body).__name__}")
    return body


def _request_headers(request: Request) -> Headers:
    headers: Headers = {}
    for name, value in request.headers.items():
        headers.setdefault(name, []).append(value)
    return headers


class GraphQLHandler:
    """
    Executes GraphQL requests received over HTTP.

    The handler turns each request into a `WebInput`, awaits the injected
    execution function, and renders the resulting `WebOutput` as a 200 JSON
    response. Errors from the execution function are not caught here.
    """

    def __init__(self, execute: ExecuteFn):
        """
        Args:
            execute: Runs one query, typically `WebInterceptorExecutionChain.execute`.
        """
        self.execute = execute

    @classmethod
    def from_schema(
        cls,
        schema: GraphQLSchema,
        interceptors: Optional[Sequence[WebInterceptor]] = None,
        root_value: Any = None,
    ) -> "GraphQLHandler":
        """Create a handler that executes queries against `schema` through the given interceptors."""
        chain = WebInterceptorExecutionChain(schema, interceptors, root_value=root_value)
        logger.info(f"GraphQL handler created with {chain!r}")
        return cls(chain.execute)

    async def handle(self, request: Request) -> JSONResponse:
        """
        Handles one GraphQL request.

        Raises:
            MediaTypeError: If the request's content type is not supported.
            InputError: If the request body cannot be read as a JSON object.
        """
        web_input = WebInput(uri=str(request.url), headers=_request_headers(request), body=await read_body(request))

        output = await self.execute(web_input)

        response = JSONResponse(status_code=status.HTTP_200_OK, content=output.to_specification())
        if output.headers:
            for name, values in output.headers.items():
                if name in response.headers:
                    del response.headers[name]
                for value in values:
                    response.headers.append(name, value)
        return response
