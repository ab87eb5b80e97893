"""Validators for sign-in requests handled by the auth endpoints."""

from typing import List

from techstacks.application.dtos.auth_dto import AuthenticateRequest
from techstacks.domain.services.validation import ValidatorEntry


def validate_provider(request: AuthenticateRequest, errors: List[str]) -> None:
    if not request.provider or not request.provider.strip():
        errors.append("Provider is required.")


def validate_oauth2_callback(request: AuthenticateRequest, errors: List[str]) -> None:
    if "code" in request.params and not request.params.get("state"):
        errors.append("An authorization code must be accompanied by its state.")


def validate_oauth1_callback(request: AuthenticateRequest, errors: List[str]) -> None:
    if "oauth_token" in request.params and not request.params.get("oauth_verifier"):
        errors.append("An oauth_token must be accompanied by its oauth_verifier.")


VALIDATORS: List[ValidatorEntry] = [
    (AuthenticateRequest, validate_provider),
    (AuthenticateRequest, validate_oauth2_callback),
    (AuthenticateRequest, validate_oauth1_callback),
]
