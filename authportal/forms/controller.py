# File: authportal/forms/controller.py

"""
Form controllers for the login and signup flows.

A form owns its field values, validates them before any network call,
performs at most one submission at a time and settles into exactly one
result. Failures never raise out of ``submit``; they become results the
caller shows to the user.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

import httpx

from authportal.forms.validation import validate_login, validate_signup
from authportal.schemas.auth import Credentials

logger = logging.getLogger(__name__)


# -----------------------------
# Results
# -----------------------------

@dataclass(frozen=True)
class Success:
    redirect_to: str


@dataclass(frozen=True)
class ValidationFailure:
    message: str


@dataclass(frozen=True)
class RequestFailure:
    message: str


SubmissionResult = Union[Success, ValidationFailure, RequestFailure]


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SETTLED = "settled"


class SubmissionFailed(Exception):
    """Non-2xx answer from the auth endpoint. The body is kept, never shown."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


# -----------------------------
# Forms
# -----------------------------

class AuthForm(ABC):
    endpoint: str = ""
    success_redirect: str = "/"
    failure_message: str = ""

    def __init__(
        self,
        client: httpx.Client,
        *,
        on_redirect: Optional[Callable[[str], None]] = None,
    ):
        self.client = client
        self.on_redirect = on_redirect
        self.credentials = Credentials()
        self.submitting = False
        self.result: Optional[SubmissionResult] = None

    @property
    def state(self) -> FormState:
        if self.submitting:
            return FormState.SUBMITTING
        if self.result is not None:
            return FormState.SETTLED
        return FormState.IDLE

    @property
    def submit_disabled(self) -> bool:
        return self.submitting

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.result, (ValidationFailure, RequestFailure)):
            return self.result.message
        return None

    def update(self, **fields) -> None:
        unknown = sorted(set(fields) - set(Credentials.model_fields))
        if unknown:
            raise TypeError(f"Unknown form field(s): {', '.join(unknown)}")
        self.credentials = self.credentials.model_copy(update=fields)

    @abstractmethod
    def validate(self) -> Optional[str]:
        ...

    def submit(self) -> Optional[SubmissionResult]:
        """
        Validate and send the form.

        Returns None, without touching the form, while a previous
        submission is still in flight.
        """
        if self.submitting:
            logger.debug("Ignoring submit on %s: already in flight", self.endpoint)
            return None

        self.result = None

        message = self.validate()
        if message is not None:
            return self._settle(ValidationFailure(message))

        self.submitting = True
        try:
            response = self.client.post(self.endpoint, json=self.credentials.to_payload())
            if not response.is_success:
                raise SubmissionFailed(response.status_code, response.text)
        except (httpx.HTTPError, SubmissionFailed) as exc:
            logger.info("Submission to %s failed: %s", self.endpoint, exc)
            result: SubmissionResult = RequestFailure(self.failure_message)
        else:
            result = Success(self.success_redirect)
        finally:
            self.submitting = False

        self._settle(result)
        if isinstance(result, Success) and self.on_redirect is not None:
            self.on_redirect(result.redirect_to)
        return result

    def _settle(self, result: SubmissionResult) -> SubmissionResult:
        self.result = result
        return result


class LoginForm(AuthForm):
    endpoint = "/api/auth/login"
    success_redirect = "/"
    failure_message = "Login failed. Please try again."

    def validate(self) -> Optional[str]:
        return validate_login(self.credentials.email, self.credentials.password)


class SignupForm(AuthForm):
    endpoint = "/api/auth/signup"
    success_redirect = "/login"
    failure_message = "Signup failed. Please try again."

    def validate(self) -> Optional[str]:
        return validate_signup(
            self.credentials.email,
            self.credentials.password,
            self.credentials.confirm_password,
        )
