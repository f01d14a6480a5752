from graphql_web.core.web_input import WebInput
from graphql_web.core.web_output import WebOutput
from graphql_web.interceptors.web_interceptor import WebInterceptor


class ExecutionLoggingInterceptor(WebInterceptor):
    """Logs the operation being executed and how many errors it produced.

    Returns its input and output unmodified.
    """

    async def pre_handle(self, web_input: WebInput) -> WebInput:
        self.logger.info(
            "Executing GraphQL operation",
            extra={
                "operation_name": web_input.operation_name or "<anonymous>",
                "uri": web_input.uri,
                "has_variables": bool(web_input.variables),
            },
        )
        return web_input

    async def post_handle(self, web_output: WebOutput) -> WebOutput:
        self.logger.info(
            "GraphQL operation finished",
            extra={
                "error_count": len(web_output.errors),
                "has_data": web_output.data is not None,
            },
        )
        return web_output
