"""HTTP routes exposing the refinement pipeline."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.dependencies import get_transformation_service
from app.models import TransformationResult
from app.services.transformation_service import TransformationService

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_STATUS = {
    "validation_error": 422,
    "backend_error": 502,
}


@router.post("/refine", response_model=TransformationResult)
async def refine(
    request: Request,
    service: Annotated[TransformationService, Depends(get_transformation_service)],
) -> JSONResponse:
    """Refine the tone of a letter; the original text comes back when refinement is off."""

    raw = await _read_json(request)
    result = await service.invoke(raw)

    status_code = 200
    if result.error is not None:
        status_code = _ERROR_STATUS[result.error.kind]
        logger.info(
            "Refinement failed",
            extra={"kind": result.error.kind, "client": _client_repr(request)},
        )

    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


async def _read_json(request: Request) -> Any:
    """Decode the body, treating anything that is not JSON as a missing request."""

    try:
        return await request.json()
    except ValueError:
        return None


def _client_repr(request: Request) -> str:
    """Render the remote client for logging purposes."""

    client = request.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"
