"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BookStore, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: BookStore = app.state.store
    logger.info(
        "Starting Bookshelf API...",
        book_count=len(store.all_books()),
        author_count=len(store.all_authors()),
    )

    yield

    logger.info("Shutting down Bookshelf API...")


def create_app(store: BookStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Book store to serve. Built from settings when omitted.
    """
    if store is None:
        store = create_store(settings)

    app = FastAPI(
        title="Bookshelf API",
        description="Books and authors served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server must not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(store, graphiql=settings.graphiql)
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
