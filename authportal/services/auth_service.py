# File: authportal/services/auth_service.py

"""
Authentication service placeholder.

Only presence checks happen here. There is no user lookup, no password
verification and no token generation: the token and user id handed back
are fixed values so the frontend flow can be exercised end to end.
"""

import logging

from authportal.core.errors import MissingFieldsError
from authportal.schemas.auth import LoginResponse, SignupResponse

logger = logging.getLogger(__name__)

STUB_TOKEN = "dev-token"
STUB_USER_ID = "dev-user-id"


def _present(value) -> bool:
    # Empty lists and objects count as present, as they do in the browser
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def stub_login(payload: dict) -> LoginResponse:
    """
    Accept any login that names an email.

    The password is not looked at.
    """
    email = payload.get("email")
    if not _present(email):
        raise MissingFieldsError("email is required")

    logger.info("Stub login accepted for %s", email)
    return LoginResponse(token=STUB_TOKEN, email=email)


def stub_signup(payload: dict) -> SignupResponse:
    """
    Accept any signup that carries both an email and a password.

    Nothing is stored.
    """
    email = payload.get("email")
    password = payload.get("password")
    if not _present(email) or not _present(password):
        raise MissingFieldsError("email and password are required")

    logger.info("Stub signup accepted for %s", email)
    return SignupResponse(user_id=STUB_USER_ID, email=email)
