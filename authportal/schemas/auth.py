# File: authportal/schemas/auth.py

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------
# Form-side credentials
# -----------------------------

class Credentials(BaseModel):
    email: str = ""
    password: str = ""
    confirm_password: Optional[str] = None

    def to_payload(self) -> dict:
        # The confirmation never leaves the form
        return self.model_dump(include={"email", "password"})


# -----------------------------
# Stub endpoint responses
# -----------------------------

class StubResponse(BaseModel):
    ok: bool = True
    # Echoed back exactly as received
    email: Any


class LoginResponse(StubResponse):
    token: str


class SignupResponse(StubResponse):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")


class ErrorResponse(BaseModel):
    error: str
