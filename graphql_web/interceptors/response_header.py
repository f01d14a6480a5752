"""Interceptor adding a header to every GraphQL response."""

import os
from typing import Optional

from pydantic import Field, model_validator

from graphql_web.core.web_output import WebOutput
from graphql_web.interceptors.web_interceptor import WebInterceptor


class ResponseHeaderInterceptor(WebInterceptor):
    """Adds a header to the response, with a fixed value or one taken from an environment variable.

    Exactly one of `value` and `env_var_name` must be configured.
    """

    header_name: str = Field()
    value: Optional[str] = Field(default=None)
    env_var_name: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_value_source(self):
        if not self.header_name:
            raise ValueError("header_name cannot be empty.")
        if (self.value is None) == (self.env_var_name is None):
            raise ValueError("Exactly one of 'value' and 'env_var_name' must be set.")
        return self

    async def post_handle(self, web_output: WebOutput) -> WebOutput:
        """
        Appends the configured header to the output.

        Raises:
            ValueError: if the configured environment variable is not set.
        """
        header_value = self.value
        if self.env_var_name is not None:
            header_value = os.environ.get(self.env_var_name)
            if header_value is None:
                error_msg = f"Environment variable '{self.env_var_name}' not set for interceptor {self.name}."
                self.logger.error(error_msg)
                raise ValueError(error_msg)

        self.logger.debug(f"Adding response header '{self.header_name}' ({self.name}).")
        return web_output.with_header(self.header_name, header_value)
