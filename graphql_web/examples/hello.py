"""A small schema for trying out the endpoint.

Run with ``GRAPHQL_SCHEMA=graphql_web.examples.hello:schema python -m graphql_web``.
"""

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)


def resolve_greet(root, info, name: str = "world") -> str:
    return f"Hello, {name}!"


def resolve_header(root, info, name: str):
    # The execution chain passes the WebInput as context
    return info.context.header(name)


query_type = GraphQLObjectType(
    "Query",
    lambda: {
        "hello": GraphQLField(GraphQLString, resolve=lambda root, info: "world"),
        "greet": GraphQLField(
            GraphQLString,
            args={"name": GraphQLArgument(GraphQLString, default_value="world")},
            resolve=resolve_greet,
        ),
        "header": GraphQLField(
            GraphQLString,
            args={"name": GraphQLArgument(GraphQLNonNull(GraphQLString))},
            resolve=resolve_header,
        ),
        "requestUri": GraphQLField(GraphQLString, resolve=lambda root, info: info.context.uri),
    },
)

schema = GraphQLSchema(query=query_type)
