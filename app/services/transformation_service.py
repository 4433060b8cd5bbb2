"""Tone refinement pipeline with a no-backend fallback."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from app.contract import validate_request, validate_response
from app.exceptions import BackendError, ValidationError
from app.models import TransformationResult
from app.services.instruction import build_instruction

logger = logging.getLogger(__name__)


class Backend(Protocol):
    """Text producer that rewrites a letter given an instruction."""

    async def complete(self, instruction: str) -> Any:
        ...


class TransformationService:
    """Validate a request, rewrite it through ``backend``, validate the output.

    Constructed without a backend the service runs in fallback mode: requests
    are validated identically and the original text is returned unchanged.
    """

    def __init__(self, backend: Backend | None = None, max_text_length: int | None = None) -> None:
        self._backend = backend
        self._max_text_length = max_text_length

    @property
    def fallback(self) -> bool:
        return self._backend is None

    async def invoke(self, raw: Any) -> TransformationResult:
        """Run one transformation; failures are returned, never raised."""

        try:
            request = validate_request(raw, self._max_text_length)
        except ValidationError as exc:
            logger.info("Rejected refinement request", extra={"reason": exc.message})
            return TransformationResult.failure(exc)

        if self._backend is None:
            return TransformationResult.success(request.text)

        instruction = build_instruction(request)

        try:
            raw_output = await self._backend.complete(instruction)
        except BackendError as exc:
            return TransformationResult.failure(exc)
        except Exception:
            logger.exception("Unexpected backend failure")
            return TransformationResult.failure(BackendError("Backend request failed"))

        try:
            output = validate_response(raw_output)
        except ValidationError as exc:
            return TransformationResult.failure(exc)

        logger.info(
            "Letter refined",
            extra={"input_chars": len(request.text), "output_chars": len(output)},
        )
        return TransformationResult.success(output)
