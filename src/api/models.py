"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Form fields default to empty strings: missing values are reported by the
registration schema as field errors, not rejected by request parsing.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.domain.registration_schema import RegistrationInput


class RegistrationFormRequest(BaseModel):
    """Registration form fields as typed by the user."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = ""
    password: str = ""
    name: str = ""
    confirm_password: str = Field("", alias="confirmPassword")

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            email=self.email,
            password=self.password,
            name=self.name,
            confirm_password=self.confirm_password,
        )


class SubmitRequest(RegistrationFormRequest):
    """Registration form fields plus the Terms of Service checkbox."""

    terms_accepted: bool = Field(False, alias="termsAccepted")


class ValidationResponse(BaseModel):
    """Field-level validation result."""

    valid: bool
    errors: dict[str, list[str]]


class FormStateResponse(BaseModel):
    """Observable state of a registration form."""

    form_id: str
    pending: bool
    last_error: str | None = None


class SubmitResponse(BaseModel):
    """Outcome of a completed submission."""

    status: Literal["registered", "failed"]
    redirect_to: str | None = None
    user: dict[str, Any] | None = None
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
