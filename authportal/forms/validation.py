# File: authportal/forms/validation.py

"""
Client-side validation rules for the login and signup forms.

Rules run in order and the first failure wins. Each validator returns the
message to show, or None when the fields may be submitted.
"""

from typing import Optional

MIN_PASSWORD_LENGTH = 8

REQUIRED_MESSAGE = "Email and password are required"
PASSWORD_TOO_SHORT_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"


def password_length(password: str) -> int:
    """Length in UTF-16 code units, as the browser counts it."""
    return len(password.encode("utf-16-le", "surrogatepass")) // 2


def validate_login(email: str, password: str) -> Optional[str]:
    if not email or not password:
        return REQUIRED_MESSAGE
    return None


def validate_signup(email: str, password: str, confirm_password: Optional[str]) -> Optional[str]:
    if not email or not password:
        return REQUIRED_MESSAGE
    if password_length(password) < MIN_PASSWORD_LENGTH:
        return PASSWORD_TOO_SHORT_MESSAGE
    if password != confirm_password:
        return PASSWORD_MISMATCH_MESSAGE
    return None
