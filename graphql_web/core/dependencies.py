import importlib
import logging

from fastapi import HTTPException, Request, status
from graphql import GraphQLSchema

from graphql_web.exceptions import SchemaLoadError
from graphql_web.handler import GraphQLHandler
from graphql_web.interceptors.loader import load_interceptors_from_file
from graphql_web.settings import Settings

logger = logging.getLogger(__name__)

# --- Dependency Providers --- #


def get_graphql_handler(request: Request) -> GraphQLHandler:
    """Dependency to retrieve the GraphQLHandler from application state."""
    handler: GraphQLHandler | None = getattr(request.app.state, "graphql_handler", None)
    if handler is None:
        logger.critical(
            "GraphQLHandler not found in application state. "
            "This indicates a critical setup error in the application lifespan."
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error: GraphQL handler not initialized.",
        )
    return handler


def load_schema(import_path: str) -> GraphQLSchema:
    """
    Imports a GraphQLSchema from a 'module:attribute' path.

    Raises:
        SchemaLoadError: If the path is malformed, the import fails, or the
            attribute is not a GraphQLSchema.
    """
    module_name, sep, attribute = import_path.partition(":")
    if not sep or not module_name or not attribute:
        raise SchemaLoadError(f"Invalid schema import path '{import_path}', expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(f"Could not import schema module '{module_name}': {e}") from e

    schema = getattr(module, attribute, None)
    if not isinstance(schema, GraphQLSchema):
        raise SchemaLoadError(f"'{import_path}' is not a GraphQLSchema, got {type(schema).__name__}")
    return schema


def initialize_graphql_handler(app_settings: Settings) -> GraphQLHandler:
    """Build the GraphQLHandler from the configured schema and interceptor file.

    Raises:
        SchemaLoadError: If no schema is configured or it cannot be loaded.
        InterceptorLoadError: If the interceptor file is invalid.
    """
    schema_path = app_settings.get_schema_import_path()
    if not schema_path:
        raise SchemaLoadError("GRAPHQL_SCHEMA is not configured.")
    logger.info(f"Loading GraphQL schema from {schema_path}")
    schema = load_schema(schema_path)

    interceptors = []
    interceptors_filepath = app_settings.get_interceptors_filepath()
    if interceptors_filepath:
        logger.info(f"Loading interceptors from file: {interceptors_filepath}")
        interceptors = load_interceptors_from_file(interceptors_filepath)

    return GraphQLHandler.from_schema(schema, interceptors)
