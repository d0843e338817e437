from fastapi import APIRouter

from card_ssr.api import cards

api_router = APIRouter()
api_router.include_router(cards.router)

__all__ = ["api_router"]
