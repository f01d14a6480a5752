# Serialization type definitions.

from dataclasses import dataclass
from typing import Any, List, TypeAlias, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

# Define the base types that can be serialized
SerializablePrimitive = Union[str, float, int, bool]

# Define the recursive type for dictionaries
SerializableDict: TypeAlias = dict[str, Union[SerializablePrimitive, List[Any], dict[str, Any], None]]

SerializableDictAdapter = TypeAdapter(SerializableDict)

T = TypeVar("T", bound=BaseModel)


def safe_model_validate(model_class: type[T], data: SerializableDict) -> T:
    """Safely validate data through SerializableDict before creating model.

    Goes through the constructor so that subclass `__init__` defaults apply.
    """
    validated_data = SerializableDictAdapter.validate_python(data)
    return model_class(**validated_data)


@dataclass
class SerializedInterceptor:
    """Represents the serialized form of a WebInterceptor.

    Attributes:
        type (str): The registered name of the interceptor type (e.g., "ResponseHeader").
        config (SerializableDict): The parameters needed to reconstruct the instance.
    """

    type: str
    config: SerializableDict
