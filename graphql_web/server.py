import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from graphql_web.core.dependencies import get_graphql_handler
from graphql_web.exceptions import GraphQLWebError
from graphql_web.handler import GraphQLHandler

logger = logging.getLogger(__name__)

# The handler reads the body itself, so the request body is only described
# in the OpenAPI schema instead of being declared as an endpoint parameter.
graphql_request_body: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "query": {"type": "string"},
                        "operationName": {"type": "string"},
                        "variables": {"type": "object"},
                        "extensions": {"type": "object"},
                    },
                    "required": ["query"],
                },
                "examples": {
                    "hello": {"value": {"query": "{ hello }"}},
                    "with variables": {
                        "value": {
                            "query": "query Greet($name: String) { greet(name: $name) }",
                            "operationName": "Greet",
                            "variables": {"name": "world"},
                        },
                    },
                },
            }
        },
    }
}


def create_graphql_router(path: str) -> APIRouter:
    """Create the router exposing the GraphQL endpoint at `path`."""
    router = APIRouter()

    @router.post(path, tags=["GraphQL"], openapi_extra=graphql_request_body)
    async def graphql_endpoint(
        request: Request,
        handler: GraphQLHandler = Depends(get_graphql_handler),
    ) -> Response:
        """Execute a GraphQL request (`query`, `operationName`, `variables`, `extensions`)."""
        logger.info(
            "GraphQL request received",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else "unknown",
            },
        )
        response = await handler.handle(request)
        logger.info(
            "GraphQL response sent",
            extra={"path": request.url.path, "status_code": response.status_code},
        )
        return response

    return router


async def graphql_web_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a GraphQLWebError as a JSON error response with its status code."""
    status_code = getattr(exc, "status_code", 500)
    detail = getattr(exc, "detail", None) or str(exc)
    logger.warning(
        f"Rejected GraphQL request: {detail}",
        extra={"path": request.url.path, "status_code": status_code, "error_type": exc.__class__.__name__},
    )
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GraphQLWebError, graphql_web_error_handler)
