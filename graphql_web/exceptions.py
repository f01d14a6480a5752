# GraphQL web layer exceptions


class GraphQLWebError(Exception):
    """Base exception for all errors raised by the GraphQL web layer."""

    status_code: int = 500

    def __init__(self, *args, status_code: int | None = None, detail: str | None = None):
        super().__init__(*args)
        if status_code is not None:
            self.status_code = status_code
        # Use the first arg as detail if detail kwarg is not provided and args exist
        self.detail = detail or (args[0] if args else None)


class MediaTypeError(GraphQLWebError):
    """Exception raised when the request body has an unsupported content type."""

    status_code = 415

    def __init__(self, content_type: str | None, supported: list[str] | None = None):
        self.content_type = content_type
        self.supported = supported or []
        message = f"Content type '{content_type or ''}' not supported"
        if self.supported:
            message += f"; supported: {', '.join(self.supported)}"
        super().__init__(message)


class InputError(GraphQLWebError):
    """Exception raised when the request body cannot be read or deserialized."""

    status_code = 400


class SchemaLoadError(GraphQLWebError):
    """Exception raised when the configured GraphQL schema cannot be imported."""

    pass


class InterceptorLoadError(ValueError, GraphQLWebError):
    """Custom exception for errors during interceptor loading/instantiation."""

    # Inherit from ValueError for semantic meaning (bad value/config)
    def __init__(self, *args, status_code: int | None = None, detail: str | None = None):
        GraphQLWebError.__init__(self, *args, status_code=status_code, detail=detail)
