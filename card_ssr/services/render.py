import logging
from typing import Optional

from card_ssr.config import Settings
from card_ssr.exceptions import BackendRejected, FetchError
from card_ssr.services.backend import BackendGateway
from card_ssr.services.meta import meta_for_card
from card_ssr.services.template import inject

logger = logging.getLogger(__name__)

MAX_CARD_ID = 2**32 - 1


def parse_card_id(raw: str) -> Optional[int]:
    """Card ids are unsigned integers; anything else yields ``None``."""
    if not raw.isascii() or not raw.isdigit():
        return None
    try:
        card_id = int(raw)
    except ValueError:
        return None
    if card_id > MAX_CARD_ID:
        return None
    return card_id


async def render_card_page(
    raw_card_id: str,
    gateway: BackendGateway,
    settings: Settings,
    shell: str,
) -> str:
    """Build the page for one card, falling back to the bare shell on any failure."""
    card_id = parse_card_id(raw_card_id)
    if card_id is None:
        logger.warning("Invalid card id %r, serving plain index", raw_card_id)
        return shell

    try:
        card = await gateway.fetch_card_meta(card_id)
    except BackendRejected as exc:
        logger.warning("Backend rejected card %s: %s", card_id, exc.message)
        return shell
    except FetchError as exc:
        logger.error("Failed to get info about card %s: %s", card_id, exc)
        return shell

    try:
        page = inject(shell, meta_for_card(settings, card))
    except Exception:
        logger.exception("Failed to render meta tags for card %s", card_id)
        return shell

    logger.debug("Rendered meta tags for card %s", card_id)
    return page
