"""Serve a GraphQL schema over HTTP through an ordered interceptor chain."""

__version__ = "0.1.0"
