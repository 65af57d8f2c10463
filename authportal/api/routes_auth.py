# File: authportal/api/routes_auth.py

"""
Auth API routes (placeholder).

Login and signup answer with fixed stub payloads; see
``authportal.services.auth_service``.
"""

from fastapi import APIRouter, Depends, status

from authportal.api.deps import get_json_body
from authportal.schemas.auth import ErrorResponse, LoginResponse, SignupResponse
from authportal.services.auth_service import stub_login, stub_signup

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="User login (placeholder)",
)
def login(payload: dict = Depends(get_json_body)):
    """
    Placeholder login endpoint.

    Requires ``email``; returns the static ``dev-token``.
    """
    return stub_login(payload)


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="User registration (placeholder)",
)
def signup(payload: dict = Depends(get_json_body)):
    """
    Placeholder registration endpoint.
    """
    return stub_signup(payload)
