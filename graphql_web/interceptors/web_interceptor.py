# Interface for interceptors wrapping a GraphQL execution.

import abc
import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from graphql_web.core.web_input import WebInput
from graphql_web.core.web_output import WebOutput
from graphql_web.interceptors.serialization import SerializableDict, SerializableDictAdapter, safe_model_validate

InterceptorT = TypeVar("InterceptorT", bound="WebInterceptor")


class WebInterceptor(BaseModel, abc.ABC):
    """Base class for a step wrapped around the execution of a GraphQL query.

    An interceptor may replace the `WebInput` before execution and the
    `WebOutput` after it. Both hooks default to passing their argument through,
    so subclasses only override the side they care about.

    Attributes:
        name (Optional[str]): An optional name for the interceptor instance,
            used for logging and identification.
        type (str): The registered type name, filled in automatically.
    """

    name: Optional[str] = Field(default=None)
    type: str = Field(default="")
    logger: logging.Logger = Field(default_factory=lambda: logging.getLogger(__name__), exclude=True)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def get_interceptor_type_name(cls) -> str:
        """Get the canonical type name for serialization from the registry."""
        # Import here to avoid circular imports
        from graphql_web.interceptors.registry import INTERCEPTOR_CLASS_TO_NAME

        type_name = INTERCEPTOR_CLASS_TO_NAME.get(cls)
        if type_name is None:
            raise ValueError(f"{cls.__name__} is not registered in INTERCEPTOR_CLASS_TO_NAME registry")
        return type_name

    def __init__(self, **data: Any) -> None:
        if "type" not in data:
            data["type"] = self.get_interceptor_type_name()
        if data.get("name") is None:
            data["name"] = self.__class__.__name__
        super().__init__(**data)

    async def pre_handle(self, web_input: WebInput) -> WebInput:
        """Called before execution, in chain order. Returns the input to continue with."""
        return web_input

    async def post_handle(self, web_output: WebOutput) -> WebOutput:
        """Called after execution, in reverse chain order. Returns the output to continue with."""
        return web_output

    def serialize(self) -> SerializableDict:
        """Serialize using Pydantic model_dump through SerializableDict validation."""
        data = self.model_dump(mode="python", exclude={"type"}, exclude_none=True)
        return SerializableDictAdapter.validate_python(data)

    @classmethod
    def from_serialized(cls: Type[InterceptorT], config: SerializableDict) -> InterceptorT:
        """Construct an interceptor of this class from its serialized configuration."""
        return safe_model_validate(cls, config)
