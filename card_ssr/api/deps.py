from fastapi import Request

from card_ssr.config import Settings
from card_ssr.services.backend import BackendGateway
from card_ssr.storage import Storage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_gateway(request: Request) -> BackendGateway:
    return request.app.state.gateway
