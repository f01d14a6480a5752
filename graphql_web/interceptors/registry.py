# Interceptor registry mapping interceptor names to classes.

from typing import Dict, Type

from .execution_logging import ExecutionLoggingInterceptor
from .header_variable import HeaderVariableInterceptor
from .response_header import ResponseHeaderInterceptor
from .web_interceptor import WebInterceptor

# Registry mapping interceptor names (as used in serialization/config) to their classes
INTERCEPTOR_NAME_TO_CLASS: Dict[str, Type["WebInterceptor"]] = {
    "ExecutionLogging": ExecutionLoggingInterceptor,
    "HeaderVariable": HeaderVariableInterceptor,
    "ResponseHeader": ResponseHeaderInterceptor,
}

INTERCEPTOR_CLASS_TO_NAME: Dict[Type["WebInterceptor"], str] = {v: k for k, v in INTERCEPTOR_NAME_TO_CLASS.items()}
