from pydantic import Field

from graphql_web.core.web_input import WebInput
from graphql_web.interceptors.web_interceptor import WebInterceptor


class HeaderVariableInterceptor(WebInterceptor):
    """Copies a request header into a GraphQL variable.

    Variables sent by the client take precedence; the header is only used when
    the variable is absent. Requests without the header are left unchanged.
    """

    header_name: str = Field()
    variable_name: str = Field()

    async def pre_handle(self, web_input: WebInput) -> WebInput:
        header_value = web_input.header(self.header_name)
        if header_value is None:
            return web_input

        variables = web_input.variables
        if not isinstance(variables, dict) or self.variable_name in variables:
            return web_input

        self.logger.debug(f"Setting variable '{self.variable_name}' from header '{self.header_name}' ({self.name}).")
        return web_input.transform(variables={**variables, self.variable_name: header_value})
