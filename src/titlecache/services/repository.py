"""Title repository: mediates between the network and the title cache."""

from titlecache.clients.database import TitleDao
from titlecache.clients.network import MainNetwork
from titlecache.models import REFRESH_ERROR_MESSAGE, Title, TitleRefreshError
from titlecache.observable import LiveValue
from titlecache.utils.logging import get_logger

logger = get_logger(__name__)


class TitleRepository:
    """Fetches titles from the network and caches them locally.

    The cached title is the source of truth for readers. Observing
    `title` never hits the network; call `refresh_title` to load a new one.
    """

    def __init__(self, network: MainNetwork, title_dao: TitleDao) -> None:
        self._network = network
        self._dao = title_dao
        self.title: LiveValue[str | None] = title_dao.title_live_data.map(
            lambda t: t.title if t is not None else None
        )

    async def refresh_title(self) -> None:
        """Fetch the next title and store it.

        Raises:
            TitleRefreshError: If the network request fails. Nothing is
                stored in that case.
        """
        logger.info("Refreshing title")
        try:
            result = await self._network.fetch_next_title()
        except Exception as e:
            logger.warning("Title refresh failed", error=str(e))
            raise TitleRefreshError(REFRESH_ERROR_MESSAGE, e) from e

        await self._dao.insert_title(Title(result))
        logger.info("Title refreshed", title=result)

    def close(self) -> None:
        """Detach the title view from the store."""
        self.title.close()
