# Loads interceptors from serialized data.

import json
import logging
from typing import List

from graphql_web.exceptions import InterceptorLoadError
from graphql_web.interceptors.serialization import SerializedInterceptor
from graphql_web.interceptors.web_interceptor import WebInterceptor

logger = logging.getLogger(__name__)


def load_interceptor(serialized: SerializedInterceptor) -> WebInterceptor:
    """
    Loads a WebInterceptor instance from its registered type name and config.

    Args:
        serialized: A SerializedInterceptor object.

    Returns:
        An instantiated WebInterceptor.

    Raises:
        InterceptorLoadError: If the type is unknown, the data is malformed,
                              or the interceptor rejects its configuration.
    """
    # Import the registry here to avoid circular import
    from .registry import INTERCEPTOR_NAME_TO_CLASS

    interceptor_type = serialized.type
    interceptor_config = serialized.config

    if not isinstance(interceptor_type, str):
        raise InterceptorLoadError(f"Interceptor 'type' must be a string, got: {type(interceptor_type)}")
    if not isinstance(interceptor_config, dict):
        raise InterceptorLoadError(f"Interceptor 'config' must be a dictionary, got: {type(interceptor_config)}")

    interceptor_class = INTERCEPTOR_NAME_TO_CLASS.get(interceptor_type)
    if interceptor_class is None:
        raise InterceptorLoadError(
            f"Unknown interceptor type: '{interceptor_type}'. "
            f"Available interceptors: {list(INTERCEPTOR_NAME_TO_CLASS.keys())}"
        )

    try:
        instance = interceptor_class.from_serialized(interceptor_config)
    except Exception as e:
        logger.error(f"Error instantiating interceptor '{interceptor_type}': {e}", exc_info=True)
        raise InterceptorLoadError(f"Error instantiating interceptor '{interceptor_type}': {e}") from e

    logger.info(f"Successfully loaded interceptor: {instance.name}")
    return instance


def load_interceptors_from_file(filepath: str) -> List[WebInterceptor]:
    """Load an ordered interceptor list from a JSON file of {"type", "config"} entries."""
    try:
        with open(filepath, "r") as f:
            raw_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InterceptorLoadError(f"Could not read interceptor file {filepath}: {e}") from e

    if not isinstance(raw_data, list):
        raise InterceptorLoadError(f"Interceptor data loaded from {filepath} must be a list, got {type(raw_data)}")

    interceptors = []
    for i, entry in enumerate(raw_data):
        if not isinstance(entry, dict):
            raise InterceptorLoadError(f"Item at index {i} in {filepath} is not a dictionary. Got {type(entry)}")
        interceptor_type = entry.get("type")
        interceptor_config = entry.get("config", {})
        try:
            interceptors.append(load_interceptor(SerializedInterceptor(type=interceptor_type, config=interceptor_config)))
        except InterceptorLoadError as e:
            raise InterceptorLoadError(f"Failed to load interceptor at index {i} in {filepath}: {e}") from e
    return interceptors
