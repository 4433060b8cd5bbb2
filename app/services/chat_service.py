"""Adapter for OpenAI chat completions."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import BackendError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are tasked with refining the tone of a formal letter so that it is "
    "appropriate for its recipient and subject matter. Respond with a JSON "
    'object of the form {"refinedText": "<refined letter text>"}.'
)


class ChatService:
    """Wrapper around OpenAI's chat completions endpoint."""

    _endpoint = "https://api.openai.com/v1/chat/completions"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def complete(self, instruction: str) -> Any:
        """Send ``instruction`` and return the decoded JSON completion."""

        payload = {
            "model": self._settings.chat_model,
            "temperature": self._settings.chat_temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": instruction},
            ],
        }

        headers = {
            "Authorization": f"Bearer {self._settings.openai_api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(
                self._endpoint,
                headers=headers,
                json=payload,
                timeout=self._settings.chat_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Chat completion timed out", exc_info=exc)
            raise BackendError("Chat service timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Chat completion failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise BackendError(
                "Chat service returned an error",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected chat HTTP error")
            raise BackendError("Chat service request failed") from exc

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error("Malformed chat response", extra={"raw_response": response.text})
            raise BackendError("Invalid chat response payload") from exc

        if not content:
            raise BackendError("Chat service returned empty content")

        try:
            return json.loads(content)
        except ValueError as exc:
            logger.error("Chat completion is not JSON", extra={"content": content})
            raise BackendError("Chat service returned a non-JSON completion") from exc
