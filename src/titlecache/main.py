"""FastAPI application entry point for titlecache."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from titlecache import __version__
from titlecache.api.routes import router
from titlecache.clients.database import SqliteTitleDao
from titlecache.clients.fake_backend import SkipNetworkTransport
from titlecache.clients.network import TitleNetworkClient
from titlecache.config import get_settings
from titlecache.services.repository import TitleRepository
from titlecache.services.view_model import MainViewModel
from titlecache.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the network client, title store, repository and view model."""
    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.log_json)
    logger = get_logger(__name__)
    logger.info(
        "titlecache starting",
        version=__version__,
        skip_network=settings.skip_network,
        database_path=settings.database_path,
    )

    transport = None
    if settings.skip_network:
        transport = SkipNetworkTransport(error_rate=settings.fake_error_rate)

    dao = SqliteTitleDao(settings.database_path)
    async with TitleNetworkClient(
        base_url=settings.network_base_url,
        timeout=settings.network_timeout,
        transport=transport,
    ) as network:
        repository = TitleRepository(network, dao)
        view_model = MainViewModel(repository, snackbar_delay=settings.snackbar_delay)
        app.state.repository = repository
        app.state.view_model = view_model
        try:
            yield
        finally:
            view_model.close()
            repository.close()
            dao.close()
            logger.info("titlecache shutting down")


app = FastAPI(
    title="titlecache",
    description="A cached title backed by a network source",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic info."""
    return {
        "name": "titlecache",
        "version": __version__,
        "docs": "/docs",
    }
