import asyncio

import pytest

from app.exceptions import BackendError
from app.models import TransformationResult
from app.services.transformation_service import TransformationService


@pytest.mark.asyncio
async def test_fallback_returns_text_unchanged() -> None:
    service = TransformationService()

    result = await service.invoke({"text": "Request approved."})

    assert service.fallback
    assert result.output == "Request approved."
    assert result.error is None
    assert result.ok


@pytest.mark.asyncio
async def test_fallback_ignores_context_fields() -> None:
    result = await TransformationService().invoke(
        {"text": "Routine update.", "recipientContext": "Captain", "subjectContext": "logistics"}
    )

    assert result.output == "Routine update."


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", [{"text": ""}, {}, None])
async def test_both_modes_reject_missing_text(raw, backend) -> None:
    for service in (TransformationService(), TransformationService(backend)):
        result = await service.invoke(raw)

        assert result.output is None
        assert result.error is not None
        assert result.error.kind == "validation_error"

    assert backend.instructions == []


@pytest.mark.asyncio
async def test_both_modes_share_length_limit(backend) -> None:
    raw = {"text": "a" * 20}

    fallback = await TransformationService(max_text_length=10).invoke(raw)
    full = await TransformationService(backend, max_text_length=10).invoke(raw)

    assert fallback == full
    assert fallback.error.kind == "validation_error"


@pytest.mark.asyncio
async def test_full_mode_returns_backend_text(backend) -> None:
    result = await TransformationService(backend).invoke(
        {"text": "See attached.", "recipientContext": "Admiral"}
    )

    assert result == TransformationResult(output="Refined.")
    [instruction] = backend.instructions
    assert "Admiral" in instruction
    assert "The subject matter is:" not in instruction


@pytest.mark.asyncio
async def test_full_mode_orders_clauses(backend) -> None:
    await TransformationService(backend).invoke(
        {"text": "Routine update.", "recipientContext": "Captain", "subjectContext": "logistics"}
    )

    [instruction] = backend.instructions
    assert instruction.index("Routine update.") < instruction.index("Captain") < instruction.index("logistics")


@pytest.mark.asyncio
async def test_backend_error_becomes_result(make_backend) -> None:
    backend = make_backend(error=BackendError("Chat service timed out"))

    result = await TransformationService(backend).invoke({"text": "Routine update."})

    assert result.output is None
    assert result.error.kind == "backend_error"
    assert result.error.message == "Chat service timed out"


@pytest.mark.asyncio
async def test_unexpected_backend_exception_is_contained(make_backend) -> None:
    backend = make_backend(error=RuntimeError("socket exploded"))

    result = await TransformationService(backend).invoke({"text": "Routine update."})

    assert result.output is None
    assert result.error.kind == "backend_error"
    assert "socket" not in result.error.message


@pytest.mark.asyncio
async def test_backend_response_missing_field(make_backend) -> None:
    backend = make_backend(reply={"text": "Refined."})

    result = await TransformationService(backend).invoke({"text": "Routine update."})

    assert result.output is None
    assert result.error.kind == "validation_error"


@pytest.mark.asyncio
async def test_concurrent_invocations_are_independent() -> None:
    class EchoBackend:
        async def complete(self, instruction: str):
            await asyncio.sleep(0)
            return {"refinedText": instruction.splitlines()[0]}

    service = TransformationService(EchoBackend())

    results = await asyncio.gather(*(service.invoke({"text": f"Letter {i}"}) for i in range(5)))

    assert [r.output for r in results] == [f"Here is the letter text: Letter {i}" for i in range(5)]


def test_result_requires_exactly_one_outcome() -> None:
    with pytest.raises(ValueError):
        TransformationResult()
    with pytest.raises(ValueError):
        TransformationResult(output="x", error={"kind": "backend_error", "message": "boom"})
