"""Validation of values entering and leaving the refinement pipeline."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError
from app.models import BackendOutput, TransformationRequest

logger = logging.getLogger(__name__)


def validate_request(raw: Any, max_text_length: int | None = None) -> TransformationRequest:
    """Turn an untyped caller payload into a ``TransformationRequest``.

    ``None`` for an optional field means "no modifier". When ``max_text_length``
    is set, the stripped text must not exceed it.
    """

    try:
        request = TransformationRequest.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(_summarize(exc)) from exc

    if max_text_length is not None and len(request.text.strip()) > max_text_length:
        raise ValidationError(f"text: length exceeds limit of {max_text_length} characters")

    return request


def validate_response(raw: Any) -> str:
    """Extract the rewritten text from a backend payload."""

    try:
        output = BackendOutput.model_validate(raw)
    except PydanticValidationError as exc:
        logger.error("Backend response broke contract", extra={"errors": exc.errors(include_url=False)})
        raise ValidationError("Backend returned an invalid response") from exc

    return output.refined_text


def _summarize(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(item) for item in error["loc"]) or "request"
        message = error["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}")
    return "; ".join(parts)
