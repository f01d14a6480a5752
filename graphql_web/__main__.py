"""
Main entry point for running the GraphQL web server.
"""

import uvicorn

from graphql_web.settings import Settings


def main():
    """Run the GraphQL server."""
    settings = Settings()
    uvicorn.run(
        "graphql_web.main:app",
        host=settings.get_app_host(),
        port=settings.get_app_port(),
        reload=settings.get_app_reload(),
        reload_dirs=["graphql_web"] if settings.get_app_reload() else None,
        log_level=settings.get_log_level().lower(),
    )


if __name__ == "__main__":
    main()
