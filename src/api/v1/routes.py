"""
API v1 routes.

Defines REST endpoints for the registration form backend.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_form_registry, get_form_session, get_registration_schema
from src.api.forms import FormRegistry, FormSession
from src.api.models import (
    ErrorResponse,
    FormStateResponse,
    RegistrationFormRequest,
    SubmitRequest,
    SubmitResponse,
    ValidationResponse,
)
from src.domain.exceptions import FormValidationError
from src.domain.registration_schema import RegistrationSchema
from src.domain.submission import SubmissionFailure

router = APIRouter(tags=["v1"])


def _state_response(form: FormSession) -> FormStateResponse:
    state = form.controller.state
    return FormStateResponse(form_id=form.form_id, pending=state.pending, last_error=state.last_error)


@router.post(
    "/validate",
    response_model=ValidationResponse,
    summary="Validate registration form fields",
    description="Run the registration rules against the current form values. "
    "Intended for live feedback while the user types.",
)
async def validate(
    request_data: RegistrationFormRequest,
    schema: RegistrationSchema = Depends(get_registration_schema),
) -> ValidationResponse:
    errors = schema.validate(request_data.to_input())
    return ValidationResponse(valid=not errors, errors=errors)


@router.post(
    "/forms",
    response_model=FormStateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a registration form",
)
async def open_form(registry: FormRegistry = Depends(get_form_registry)) -> FormStateResponse:
    return _state_response(registry.open())


@router.get(
    "/forms/{form_id}",
    response_model=FormStateResponse,
    responses={404: {"model": ErrorResponse, "description": "Form not found"}},
    summary="Get registration form state",
)
async def get_form(form: FormSession = Depends(get_form_session)) -> FormStateResponse:
    return _state_response(form)


@router.delete(
    "/forms/{form_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"model": ErrorResponse, "description": "Form not found"},
        409: {"model": ErrorResponse, "description": "Submission already in progress"},
    },
    summary="Close a registration form",
    description="Discard an abandoned form. A form with a submission in flight cannot be closed.",
)
async def close_form(
    form: FormSession = Depends(get_form_session),
    registry: FormRegistry = Depends(get_form_registry),
) -> None:
    if form.controller.state.pending:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Submission already in progress",
        )
    registry.close(form.form_id)


@router.post(
    "/forms/{form_id}/submit",
    response_model=SubmitResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Terms of Service not accepted"},
        404: {"model": ErrorResponse, "description": "Form not found"},
        409: {"model": ErrorResponse, "description": "Submission already in progress"},
        422: {"description": "Validation error"},
    },
    summary="Submit registration",
    description="Validate the form, register with the authentication service, "
    "then log in and return the post-registration destination. "
    "Service failures are reported in the response body and form state.",
)
async def submit(
    request_data: SubmitRequest,
    form: FormSession = Depends(get_form_session),
    registry: FormRegistry = Depends(get_form_registry),
) -> SubmitResponse:
    """
    Submit the registration form.

    - **email**, **password**, **name**, **confirmPassword**: form fields
    - **termsAccepted**: Terms of Service checkbox, must be true
    """
    controller = form.controller
    if controller.state.pending:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Submission already in progress",
        )
    if not controller.can_submit(request_data.terms_accepted):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Terms of Service must be accepted",
        )

    try:
        result = await controller.submit(request_data.to_input())
    except FormValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"errors": exc.errors},
        ) from None

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Submission already in progress",
        )
    if isinstance(result, SubmissionFailure):
        return SubmitResponse(status="failed", error=result.message)

    # A registered form has nothing left to submit
    registry.close(form.form_id)
    return SubmitResponse(
        status="registered",
        redirect_to=form.navigator.current,
        user=dict(result.user),
    )
