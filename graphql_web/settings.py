import os
from typing import Optional

from dotenv import load_dotenv

# Load .env file variables into environment
load_dotenv(verbose=True)


class Settings:
    """Application configuration settings loaded from environment variables."""

    # --- Core Settings ---
    GRAPHQL_PATH: str = "/graphql"
    # Import path of the GraphQL schema, e.g. "myapp.schema:schema"
    GRAPHQL_SCHEMA: Optional[str] = None
    # JSON file holding the ordered interceptor list
    INTERCEPTORS_FILEPATH: Optional[str] = None

    # --- Helper Methods using os.getenv ---
    def get_graphql_path(self) -> str:
        """Returns the URL path the GraphQL endpoint is mounted on."""
        path = os.getenv("GRAPHQL_PATH", self.GRAPHQL_PATH)
        if not path.startswith("/"):
            raise ValueError(f"Invalid GRAPHQL_PATH format (must start with '/'): {path}")
        return path

    def get_schema_import_path(self) -> Optional[str]:
        """Returns the 'module:attribute' path of the GraphQL schema, if set."""
        return os.getenv("GRAPHQL_SCHEMA")

    def get_interceptors_filepath(self) -> Optional[str]:
        """Returns the path to the interceptor configuration file, if set."""
        return os.getenv("INTERCEPTORS_FILEPATH")

    # --- Logging Settings ---
    def get_log_level(self, default: str = "INFO") -> str:
        """Gets the configured log level, defaulting if not set."""
        return os.getenv("LOG_LEVEL", default).upper()

    # --- Server Settings ---
    def get_app_host(self) -> str:
        return os.getenv("GRAPHQL_WEB_HOST", "0.0.0.0")  # nosec B104

    def get_app_port(self) -> int:
        """Returns the port the server listens on."""
        port_str = os.getenv("GRAPHQL_WEB_PORT", "8000")
        try:
            return int(port_str)
        except ValueError:
            raise ValueError("GRAPHQL_WEB_PORT environment variable must be an integer.")

    def get_app_reload(self) -> bool:
        return os.getenv("GRAPHQL_WEB_RELOAD", "false").lower() == "true"
