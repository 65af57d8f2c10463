# File: authportal/api/routes_pages.py

"""
HTML pages for the auth flow.

The forms are validated and submitted in the browser by
``static/js/auth-form.js``; everything the script needs (endpoint,
redirect target, messages) is rendered into data attributes from the
Python form definitions so both sides share one set of rules.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from authportal.core.config import settings
from authportal.forms import validation
from authportal.forms.controller import LoginForm, SignupForm

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


def _form_context(form_cls) -> dict:
    return {
        "endpoint": form_cls.endpoint,
        "redirect": form_cls.success_redirect,
        "failure_message": form_cls.failure_message,
        "required_message": validation.REQUIRED_MESSAGE,
        "min_password_length": validation.MIN_PASSWORD_LENGTH,
        "too_short_message": validation.PASSWORD_TOO_SHORT_MESSAGE,
        "mismatch_message": validation.PASSWORD_MISMATCH_MESSAGE,
    }


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    return templates.TemplateResponse(
        request, "index.html", {"project_name": settings.PROJECT_NAME}
    )


@router.get("/login", response_class=HTMLResponse, include_in_schema=False)
async def login_page(request: Request):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"project_name": settings.PROJECT_NAME, "form": _form_context(LoginForm)},
    )


@router.get("/signup", response_class=HTMLResponse, include_in_schema=False)
async def signup_page(request: Request):
    return templates.TemplateResponse(
        request,
        "signup.html",
        {"project_name": settings.PROJECT_NAME, "form": _form_context(SignupForm)},
    )
