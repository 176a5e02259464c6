"""API routes for titlecache."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from titlecache import __version__
from titlecache.api.models import (
    HealthResponse,
    SnackbarResponse,
    TapsResponse,
    TitleResponse,
)
from titlecache.models import TitleRefreshError
from titlecache.services.repository import TitleRepository
from titlecache.services.view_model import MainViewModel
from titlecache.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["api"])


def get_repository(request: Request) -> TitleRepository:
    """Return the repository created during application startup."""
    repository: TitleRepository = request.app.state.repository
    return repository


def get_view_model(request: Request) -> MainViewModel:
    """Return the view model created during application startup."""
    view_model: MainViewModel = request.app.state.view_model
    return view_model


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.get("/title", response_model=TitleResponse)
async def get_title(
    repository: TitleRepository = Depends(get_repository),
) -> TitleResponse:
    """Return the cached title without refreshing it."""
    return TitleResponse(title=repository.title.value)


@router.post("/title/refresh", response_model=TitleResponse)
async def refresh_title(
    repository: TitleRepository = Depends(get_repository),
) -> TitleResponse:
    """Fetch a new title from the network and cache it.

    Returns:
        TitleResponse with the newly cached title.

    Raises:
        HTTPException: 503 if the title could not be fetched.
    """
    logger.info("Refresh endpoint called")
    try:
        await repository.refresh_title()
    except TitleRefreshError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        ) from e
    return TitleResponse(title=repository.title.value)


@router.post("/taps", response_model=TapsResponse)
async def tap(view_model: MainViewModel = Depends(get_view_model)) -> TapsResponse:
    """Register a tap on the main view.

    The greeting snackbar is posted after the configured delay, so it is
    read separately from GET /snackbar.
    """
    view_model.on_main_view_clicked()
    return TapsResponse(taps=view_model.taps.value)


@router.get("/snackbar", response_model=SnackbarResponse)
async def get_snackbar(
    view_model: MainViewModel = Depends(get_view_model),
) -> SnackbarResponse:
    """Return the pending snackbar message, if any."""
    return SnackbarResponse(message=view_model.snackbar.value)


@router.post("/snackbar/shown", response_model=SnackbarResponse)
async def snackbar_shown(
    view_model: MainViewModel = Depends(get_view_model),
) -> SnackbarResponse:
    """Acknowledge the snackbar so it is not shown again."""
    view_model.on_snackbar_shown()
    return SnackbarResponse(message=view_model.snackbar.value)
