from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from card_ssr.api.deps import get_app_settings, get_gateway, get_storage
from card_ssr.config import Settings
from card_ssr.services.backend import BackendGateway
from card_ssr.services.render import render_card_page
from card_ssr.storage import Storage

router = APIRouter(prefix="/open", tags=["cards"])


@router.get("/{card_id}", response_class=HTMLResponse)
@router.get("/{card_id}/", response_class=HTMLResponse, include_in_schema=False)
async def open_card(
    card_id: str,
    settings: Annotated[Settings, Depends(get_app_settings)],
    storage: Annotated[Storage, Depends(get_storage)],
    gateway: Annotated[BackendGateway, Depends(get_gateway)],
) -> HTMLResponse:
    """Serve the SPA index with meta tags for the card, or the plain index."""
    body = await render_card_page(card_id, gateway, settings, storage.index_html)
    return HTMLResponse(content=body, status_code=200)
