from typing import Any, Optional

from graphql import ExecutionResult, GraphQLError
from pydantic import BaseModel, ConfigDict, Field

from graphql_web.core.web_input import Headers


class WebOutput(BaseModel):
    """The result of a GraphQL execution plus any HTTP headers to send with it."""

    model_config = ConfigDict(frozen=True)

    data: Optional[Any] = Field(default=None)
    errors: list[dict[str, Any]] = Field(default_factory=list)
    extensions: Optional[dict[str, Any]] = Field(default=None)
    headers: Optional[Headers] = Field(default=None)

    @classmethod
    def from_execution_result(cls, result: ExecutionResult, headers: Optional[Headers] = None) -> "WebOutput":
        """Wraps a graphql-core ExecutionResult, formatting its errors."""
        return cls(
            data=result.data,
            errors=[error.formatted for error in result.errors or []],
            extensions=result.extensions,
            headers=headers,
        )

    @classmethod
    def from_error(cls, message: str) -> "WebOutput":
        """An output carrying a single request error and no data."""
        return cls(errors=[GraphQLError(message).formatted])

    def to_specification(self) -> dict[str, Any]:
        """Returns the response map defined by the GraphQL specification.

        "data" is always present; "errors" and "extensions" only when set.
        """
        specification: dict[str, Any] = {"data": self.data}
        if self.errors:
            specification["errors"] = self.errors
        if self.extensions is not None:
            specification["extensions"] = self.extensions
        return specification

    def with_header(self, name: str, *values: str) -> "WebOutput":
        """Returns a copy with `values` appended to header `name`."""
        headers = {key: list(vals) for key, vals in (self.headers or {}).items()}
        headers.setdefault(name, []).extend(values)
        return self.model_copy(update={"headers": headers})
