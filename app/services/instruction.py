"""Instruction text sent to the backend for a tone refinement."""

from __future__ import annotations

from typing import Callable

from app.models import TransformationRequest

CLOSING_DIRECTIVE = (
    "Please refine the letter text to ensure it is professional, respectful, and "
    "appropriate for the given context. Return only the refined letter text, "
    "with no commentary and no preamble."
)

Predicate = Callable[[TransformationRequest], bool]
ClauseBuilder = Callable[[TransformationRequest], str]


def _has(value: str | None) -> bool:
    return value is not None and value.strip() != ""


# Order is significant: text, recipient, subject, closing directive.
CLAUSES: tuple[tuple[Predicate, ClauseBuilder], ...] = (
    (lambda _: True, lambda request: f"Here is the letter text: {request.text}"),
    (
        lambda request: _has(request.recipient_context),
        lambda request: f"The recipient's rank is: {request.recipient_context.strip()}.",
    ),
    (
        lambda request: _has(request.subject_context),
        lambda request: f"The subject matter is: {request.subject_context.strip()}.",
    ),
    (lambda _: True, lambda _: CLOSING_DIRECTIVE),
)


def build_instruction(request: TransformationRequest) -> str:
    """Assemble the instruction for ``request`` from the gated clauses."""

    return "\n\n".join(build(request) for applies, build in CLAUSES if applies(request))
