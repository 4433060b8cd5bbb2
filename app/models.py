"""Pydantic models shared across application layers."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from app.exceptions import BackendError, ValidationError


class TransformationRequest(BaseModel):
    """A letter to refine, with optional context about its recipient and topic."""

    model_config = ConfigDict(frozen=True)

    text: StrictStr = Field(description="Letter text to refine.")
    recipient_context: StrictStr | None = Field(
        default=None,
        validation_alias=AliasChoices("recipientContext", "recipientRank", "recipient_context"),
        description="Recipient seniority, e.g. a rank.",
    )
    subject_context: StrictStr | None = Field(
        default=None,
        validation_alias=AliasChoices("subjectContext", "subjectMatter", "subject_context"),
        description="Topic domain of the letter.",
    )

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class BackendOutput(BaseModel):
    """Raw completion returned by the text backend."""

    refined_text: StrictStr = Field(
        validation_alias=AliasChoices("refinedText", "refined_text"),
    )

    @field_validator("refined_text")
    @classmethod
    def _refined_text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class ErrorDetail(BaseModel):
    """Caller-facing description of a failed transformation."""

    kind: Literal["validation_error", "backend_error"]
    message: str

    @classmethod
    def from_exception(cls, exc: ValidationError | BackendError) -> ErrorDetail:
        return cls(kind=exc.code, message=exc.message)


class TransformationResult(BaseModel):
    """Outcome of one transformation: either usable output or an error."""

    output: str | None = None
    error: ErrorDetail | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> TransformationResult:
        if (self.output is None) == (self.error is None):
            raise ValueError("result must carry either output or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, output: str) -> TransformationResult:
        return cls(output=output)

    @classmethod
    def failure(cls, exc: ValidationError | BackendError) -> TransformationResult:
        return cls(error=ErrorDetail.from_exception(exc))
