from .execution_chain import WebInterceptorExecutionChain
from .web_interceptor import WebInterceptor

__all__ = ["WebInterceptor", "WebInterceptorExecutionChain"]
