import logging

import httpx

from card_ssr.config import Settings
from card_ssr.exceptions import BackendRejected, TransportError
from card_ssr.schemas import AnswerError, Card, CardMeta, parse_answer

logger = logging.getLogger(__name__)


class BackendGateway:
    """Reads card metadata from the cards backend, one request per call."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.client = client

    async def fetch_card_meta(self, card_id: int) -> Card:
        url = self.settings.backend_card_url(card_id)
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc!r}") from exc

        logger.debug("GET %s -> %s", url, response.status_code)

        answer = parse_answer(response.content, CardMeta)
        if isinstance(answer, AnswerError):
            raise BackendRejected(answer.error)
        if not answer.ok:
            raise BackendRejected(f"backend answered ok=false for card {card_id}")
        return answer.result.meta
