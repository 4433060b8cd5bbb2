"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.config import Settings, get_settings
from app.services.chat_service import ChatService
from app.services.transformation_service import TransformationService


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_chat_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ChatService:
    """Dependency provider for ChatService."""

    return ChatService(client=client, settings=settings)


async def get_transformation_service(
    chat_service: ChatService = Depends(get_chat_service),
    settings: Settings = Depends(get_settings),
) -> TransformationService:
    """Full pipeline when refinement is enabled, pass-through otherwise."""

    backend = chat_service if settings.refinement_enabled else None
    return TransformationService(backend=backend, max_text_length=settings.max_text_length)
