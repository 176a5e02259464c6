"""View model for the main screen."""

import asyncio

from titlecache.models import TitleRefreshError
from titlecache.observable import LiveValue, MutableLiveValue
from titlecache.services.repository import TitleRepository
from titlecache.utils.logging import get_logger

logger = get_logger(__name__)

SNACKBAR_GREETING = "Hello, from threads!"


class MainViewModel:
    """Holds screen state and turns user actions into repository calls."""

    def __init__(self, repository: TitleRepository, snackbar_delay: float = 1.0) -> None:
        self._repository = repository
        self._snackbar_delay = snackbar_delay
        self._tap_count = 0
        self._pending: set[asyncio.Task[None]] = set()

        self._snackbar: MutableLiveValue[str | None] = MutableLiveValue(None)
        self._spinner: MutableLiveValue[bool] = MutableLiveValue(False)
        self._taps: MutableLiveValue[str] = MutableLiveValue("0 taps")

    @property
    def snackbar(self) -> LiveValue[str | None]:
        """Message to show once, or None when nothing is pending."""
        return self._snackbar

    @property
    def spinner(self) -> LiveValue[bool]:
        return self._spinner

    @property
    def taps(self) -> LiveValue[str]:
        return self._taps

    @property
    def title(self) -> LiveValue[str | None]:
        return self._repository.title

    def on_main_view_clicked(self) -> asyncio.Task[None]:
        """Count the tap and show a greeting after a short delay.

        Must be called from a running event loop.

        Returns:
            The task that will post the greeting.
        """
        self._tap_count += 1
        self._taps.set(f"{self._tap_count} taps")
        task = asyncio.create_task(self._show_greeting())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def on_snackbar_shown(self) -> None:
        """Clear the pending snackbar message."""
        self._snackbar.set(None)

    async def refresh_title(self) -> None:
        """Refresh the title, reporting refresh errors through the snackbar."""
        self._spinner.set(True)
        try:
            await self._repository.refresh_title()
        except TitleRefreshError as e:
            logger.info("Showing refresh error", message=e.message)
            self._snackbar.set(e.message)
        finally:
            self._spinner.set(False)

    async def _show_greeting(self) -> None:
        await asyncio.sleep(self._snackbar_delay)
        self._snackbar.set(SNACKBAR_GREETING)

    def close(self) -> None:
        """Cancel greetings that have not been posted yet."""
        for task in list(self._pending):
            task.cancel()
