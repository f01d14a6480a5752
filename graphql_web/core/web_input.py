import copy
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Multi-valued header mapping: name -> ordered values
Headers = dict[str, list[str]]


class WebInput(BaseModel):
    """The input to a single GraphQL execution, built from an HTTP request.

    Holds the request URI, every request header and the deserialized JSON body.
    Instances are immutable; interceptors that need a different input return a
    new one from `transform`.
    """

    model_config = ConfigDict(frozen=True)

    uri: str = Field()
    headers: Headers = Field(default_factory=dict)
    body: dict[str, Any] = Field(default_factory=dict)

    @property
    def query(self) -> Any:
        return self.body.get("query")

    @property
    def operation_name(self) -> Any:
        return self.body.get("operationName")

    @property
    def variables(self) -> Any:
        """The request variables, or an empty mapping when the client sent none."""
        variables = self.body.get("variables")
        return {} if variables is None else variables

    @property
    def extensions(self) -> Any:
        return self.body.get("extensions")

    def header(self, name: str) -> Optional[str]:
        """Returns the first value of a header, matching the name case-insensitively."""
        lowered = name.lower()
        for header_name, values in self.headers.items():
            if header_name.lower() == lowered and values:
                return values[0]
        return None

    def transform(
        self,
        *,
        body: Optional[dict[str, Any]] = None,
        headers: Optional[Headers] = None,
        variables: Optional[dict[str, Any]] = None,
    ) -> "WebInput":
        """Returns a copy with the given parts replaced.

        `variables` replaces only the body's "variables" entry and is applied
        after `body`. The copy shares no mutable state with this input.
        """
        new_body = copy.deepcopy(self.body if body is None else body)
        if variables is not None:
            new_body["variables"] = copy.deepcopy(variables)
        return self.model_copy(
            update={
                "body": new_body,
                "headers": copy.deepcopy(self.headers if headers is None else headers),
            }
        )
