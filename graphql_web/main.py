import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphql_web.core.dependencies import initialize_graphql_handler
from graphql_web.core.logging import setup_logging
from graphql_web.handler import GraphQLHandler
from graphql_web.server import create_graphql_router, register_exception_handlers
from graphql_web.settings import Settings

setup_logging()


logger = logging.getLogger(__name__)


def create_app(handler: Optional[GraphQLHandler] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application serving the GraphQL endpoint.

    Args:
        handler: A ready GraphQLHandler. When omitted, one is built at startup
            from the configured schema and interceptor file.
        settings: Application settings; a fresh `Settings()` when omitted.

    Returns:
        The configured FastAPI application.
    """
    app_settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the GraphQL handler on startup and store it in app state.

        Raises:
            RuntimeError: If the handler cannot be built from settings.
        """
        logger.info("Application startup sequence initiated.")
        if handler is not None:
            app.state.graphql_handler = handler
        else:
            try:
                app.state.graphql_handler = initialize_graphql_handler(app_settings)
            except Exception as init_exc:
                logger.critical(f"Fatal error during GraphQL handler initialization: {init_exc}", exc_info=True)
                raise RuntimeError(
                    f"Application startup failed due to GraphQL handler initialization error: {init_exc}"
                ) from init_exc
        logger.info("GraphQL handler stored in app state.")

        yield  # Application runs here

        logger.info("Application shutdown complete.")

    app = FastAPI(
        title="GraphQL Web",
        description="A GraphQL endpoint executing queries through an interceptor chain.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["General"], status_code=200)
    async def health_check():
        """Perform a basic health check.

        Returns:
            A dictionary indicating the application status.
        """
        return {"status": "ok"}

    @app.get("/")
    async def read_root():
        return {"message": "GraphQL Web is running.", "graphql_path": app_settings.get_graphql_path()}

    app.include_router(create_graphql_router(app_settings.get_graphql_path()))
    register_exception_handlers(app)
    return app


app = create_app()

# --- Run with Uvicorn (for local development) --- #

if __name__ == "__main__":
    import uvicorn

    dev_settings = Settings()
    uvicorn.run(
        "graphql_web.main:app",
        host=dev_settings.get_app_host(),
        port=dev_settings.get_app_port(),
        reload=dev_settings.get_app_reload(),
        log_level=dev_settings.get_log_level().lower(),
    )
