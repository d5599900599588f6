import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_health, routes_hotels
from app.core.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import RequestLoggingMiddleware
from app.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server is running on port %d", app.state.settings.port)
    yield
    logger.info("Shutting down, dropping %d hotels", app.state.repository.count())


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[InMemoryRepository] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(
        routes_hotels.router, prefix=settings.api_prefix, tags=["hotels"]
    )

    # Inject repository into state for dependencies
    app.state.repository = (
        repository if repository is not None else InMemoryRepository.with_seed_data()
    )
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.environment == "local",
    )
