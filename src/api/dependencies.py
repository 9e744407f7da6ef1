"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and form sessions into routes.
"""

from fastapi import Depends, HTTPException, Request, status

from src.api.forms import FormRegistry, FormSession, UnknownForm
from src.domain.registration_schema import RegistrationSchema

# Module-level singleton - RegistrationSchema is stateless
_registration_schema = RegistrationSchema()


def get_registration_schema() -> RegistrationSchema:
    """Get registration schema (singleton)."""
    return _registration_schema


def get_form_registry(request: Request) -> FormRegistry:
    """
    Get form registry from app state.

    The registry is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.forms


def get_form_session(
    form_id: str,
    registry: FormRegistry = Depends(get_form_registry),
) -> FormSession:
    """Look up an open form, 404 if it does not exist."""
    try:
        return registry.get(form_id)
    except UnknownForm:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Registration form not found",
        ) from None
