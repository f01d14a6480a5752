import json
from typing import Any, Optional, cast
from unittest.mock import patch

import pytest
from graphql_web.exceptions import InterceptorLoadError
from graphql_web.interceptors.execution_logging import ExecutionLoggingInterceptor
from graphql_web.interceptors.header_variable import HeaderVariableInterceptor
from graphql_web.interceptors.loader import load_interceptor, load_interceptors_from_file
from graphql_web.interceptors.registry import INTERCEPTOR_CLASS_TO_NAME, INTERCEPTOR_NAME_TO_CLASS
from graphql_web.interceptors.response_header import ResponseHeaderInterceptor
from graphql_web.interceptors.serialization import SerializableDict, SerializedInterceptor

# --- Test Fixtures and Mocks ---


class MockInterceptor:
    name = "mock_interceptor"

    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}
        self.name = self.config.get("name", self.name)

    @classmethod
    def from_serialized(cls, config: SerializableDict, **kwargs: Any) -> "MockInterceptor":
        if config.get("fail_load", False):
            raise ValueError("Simulated instantiation failure")
        return cls(config=cast(dict, config))


MOCK_REGISTRY = {"mock_interceptor": MockInterceptor}


def write_config(tmp_path, data) -> str:
    path = tmp_path / "interceptors.json"
    path.write_text(json.dumps(data))
    return str(path)


# --- load_interceptor ---


@patch("graphql_web.interceptors.registry.INTERCEPTOR_NAME_TO_CLASS", MOCK_REGISTRY)
def test_load_interceptor_success():
    interceptor = load_interceptor(SerializedInterceptor(type="mock_interceptor", config={"name": "one"}))

    assert isinstance(interceptor, MockInterceptor)
    assert interceptor.name == "one"


@patch("graphql_web.interceptors.registry.INTERCEPTOR_NAME_TO_CLASS", MOCK_REGISTRY)
def test_load_interceptor_unknown_type():
    with pytest.raises(InterceptorLoadError, match="Unknown interceptor type: 'nope'"):
        load_interceptor(SerializedInterceptor(type="nope", config={}))


@patch("graphql_web.interceptors.registry.INTERCEPTOR_NAME_TO_CLASS", MOCK_REGISTRY)
def test_load_interceptor_instantiation_failure_is_wrapped():
    with pytest.raises(InterceptorLoadError, match="Simulated instantiation failure") as exc_info:
        load_interceptor(SerializedInterceptor(type="mock_interceptor", config={"fail_load": True}))

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.parametrize(
    "interceptor_type, config, message",
    [
        (123, {}, "must be a string"),
        ("mock_interceptor", ["not", "a", "dict"], "must be a dictionary"),
    ],
)
def test_load_interceptor_malformed(interceptor_type, config, message):
    with pytest.raises(InterceptorLoadError, match=message):
        load_interceptor(SerializedInterceptor(type=interceptor_type, config=config))


def test_load_interceptor_invalid_config_for_real_class():
    with pytest.raises(InterceptorLoadError, match="ResponseHeader"):
        load_interceptor(SerializedInterceptor(type="ResponseHeader", config={"header_name": "X-A"}))


def test_interceptor_load_error_is_value_error():
    assert issubclass(InterceptorLoadError, ValueError)


# --- registry ---


def test_registry_is_bidirectional():
    assert INTERCEPTOR_NAME_TO_CLASS["ResponseHeader"] is ResponseHeaderInterceptor
    for name, cls in INTERCEPTOR_NAME_TO_CLASS.items():
        assert INTERCEPTOR_CLASS_TO_NAME[cls] == name


# --- load_interceptors_from_file ---


def test_load_interceptors_from_file_keeps_order(tmp_path):
    filepath = write_config(
        tmp_path,
        [
            {"type": "ExecutionLogging", "config": {"name": "log"}},
            {"type": "HeaderVariable", "config": {"header_name": "x-tenant-id", "variable_name": "tenantId"}},
            {"type": "ResponseHeader", "config": {"header_name": "X-Served-By", "value": "graphql-web"}},
        ],
    )

    interceptors = load_interceptors_from_file(filepath)

    assert [type(i) for i in interceptors] == [
        ExecutionLoggingInterceptor,
        HeaderVariableInterceptor,
        ResponseHeaderInterceptor,
    ]
    assert interceptors[0].name == "log"
    assert interceptors[1].variable_name == "tenantId"
    assert interceptors[2].value == "graphql-web"


def test_load_interceptors_from_file_config_is_optional(tmp_path):
    filepath = write_config(tmp_path, [{"type": "ExecutionLogging"}])

    interceptors = load_interceptors_from_file(filepath)

    assert len(interceptors) == 1
    assert interceptors[0].name == "ExecutionLoggingInterceptor"


def test_load_interceptors_round_trip_serialized(tmp_path):
    original = [
        ResponseHeaderInterceptor(name="region", header_name="X-Region", env_var_name="REGION"),
        HeaderVariableInterceptor(header_name="x-user", variable_name="userId"),
    ]
    data = [{"type": i.type, "config": i.serialize()} for i in original]

    assert load_interceptors_from_file(write_config(tmp_path, data)) == original


@pytest.mark.parametrize(
    "data, message",
    [
        ({"type": "ExecutionLogging"}, "must be a list"),
        (["ExecutionLogging"], "Item at index 0"),
        ([{"type": "ExecutionLogging"}, {"type": "Missing"}], "index 1"),
    ],
)
def test_load_interceptors_from_file_invalid(tmp_path, data, message):
    with pytest.raises(InterceptorLoadError, match=message):
        load_interceptors_from_file(write_config(tmp_path, data))


def test_load_interceptors_from_missing_file(tmp_path):
    with pytest.raises(InterceptorLoadError, match="Could not read interceptor file"):
        load_interceptors_from_file(str(tmp_path / "missing.json"))


def test_load_interceptors_from_invalid_json(tmp_path):
    path = tmp_path / "interceptors.json"
    path.write_text("[{")

    with pytest.raises(InterceptorLoadError, match="Could not read interceptor file"):
        load_interceptors_from_file(str(path))
