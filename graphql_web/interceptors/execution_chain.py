import logging
from typing import Any, Optional, Sequence

from graphql import GraphQLSchema, graphql

from graphql_web.core.logging import log_interceptor_execution
from graphql_web.core.web_input import WebInput
from graphql_web.core.web_output import WebOutput
from graphql_web.interceptors.web_interceptor import WebInterceptor

logger = logging.getLogger(__name__)


class WebInterceptorExecutionChain:
    """
    Executes a GraphQL query wrapped by an ordered sequence of interceptors.

    `pre_handle` is applied in declaration order before execution and
    `post_handle` in reverse order after it, so the first interceptor is the
    outermost one. If any interceptor raises, execution stops and the exception
    propagates.

    Attributes:
        schema (GraphQLSchema): The schema queries are executed against.
        interceptors (Sequence[WebInterceptor]): The ordered interceptors.
        root_value (Any): Passed to graphql-core as the root value.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        interceptors: Optional[Sequence[WebInterceptor]] = None,
        root_value: Any = None,
    ):
        self.schema = schema
        self.interceptors = tuple(interceptors or ())
        self.root_value = root_value

    async def execute(self, web_input: WebInput) -> WebOutput:
        """
        Runs the interceptors and the query for one request.

        Args:
            web_input: The input built from the HTTP request.

        Returns:
            The output after every interceptor's post_handle.

        Raises:
            Exception: Propagates any exception raised by an interceptor or the engine.
        """
        current_input = web_input
        for interceptor in self.interceptors:
            current_input = await self._apply(interceptor, "pre_handle", current_input)

        output = await self._execute_query(current_input)

        for interceptor in reversed(self.interceptors):
            output = await self._apply(interceptor, "post_handle", output)
        return output

    async def _apply(self, interceptor: WebInterceptor, phase: str, value: Any) -> Any:
        interceptor_name = interceptor.name or interceptor.__class__.__name__
        try:
            result = await getattr(interceptor, phase)(value)
        except Exception as e:
            log_interceptor_execution(
                interceptor_name, phase, "error", error=str(e), details={"error_type": e.__class__.__name__}
            )
            raise
        log_interceptor_execution(interceptor_name, phase, "completed")
        return result

    async def _execute_query(self, web_input: WebInput) -> WebOutput:
        query = web_input.query
        if not isinstance(query, str) or not query.strip():
            return WebOutput.from_error("Must provide query string.")
        variables = web_input.variables
        if not isinstance(variables, dict):
            return WebOutput.from_error("Variables must be provided as an object.")
        operation_name = web_input.operation_name
        if operation_name is not None and not isinstance(operation_name, str):
            return WebOutput.from_error("Operation name must be a string.")

        logger.debug(f"Executing query (operation: {operation_name or '<anonymous>'})")
        result = await graphql(
            self.schema,
            query,
            root_value=self.root_value,
            context_value=web_input,
            variable_values=variables,
            operation_name=operation_name,
        )
        return WebOutput.from_execution_result(result)

    def __repr__(self) -> str:
        interceptor_list_str = ", ".join(f"{i.name} <{i.__class__.__name__}>" for i in self.interceptors)
        return f"<WebInterceptorExecutionChain(interceptors=[{interceptor_list_str}])>"
