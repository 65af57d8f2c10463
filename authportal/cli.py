# authportal/cli.py

"""
Command-line client for the auth portal.

    authportal login  [--email EMAIL] [--base-url URL]
    authportal signup [--email EMAIL] [--base-url URL]
    authportal serve  [--host HOST] [--port PORT]

Missing fields are prompted for (passwords hidden), then the same form
controller the pages mirror validates and submits them.
"""

import argparse
import sys
from typing import List, Optional

import httpx
from rich.console import Console
from rich.prompt import Prompt

from authportal.core.config import settings
from authportal.core.logging import setup_logging
from authportal.forms.controller import AuthForm, LoginForm, SignupForm, Success, ValidationFailure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="authportal", description="Auth portal client")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("login", "Sign in"), ("signup", "Create an account")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--email", default=None)
        cmd.add_argument("--base-url", default=settings.api_base_url)

    serve = sub.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def fill_form(form: AuthForm, email: Optional[str]) -> None:
    """Prompt for whatever the command line did not supply."""
    if email is None:
        email = Prompt.ask("Email")
    password = Prompt.ask("Password", password=True)
    form.update(email=email, password=password)

    if isinstance(form, SignupForm):
        form.update(confirm_password=Prompt.ask("Confirm password", password=True))


def submit_form(form: AuthForm, console: Console) -> int:
    """Submit a filled form and report how it settled."""
    with console.status("Submitting..."):
        result = form.submit()

    if isinstance(result, Success):
        console.print(f"[green]✓[/green] Done. Continue at [bold]{result.redirect_to}[/bold]")
        return 0
    if isinstance(result, ValidationFailure):
        console.print(f"[yellow]✗[/yellow] {result.message}")
        return 1
    console.print(f"[red]✗[/red] {result.message}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("cli")

    if args.command == "serve":
        import uvicorn

        uvicorn.run("authportal.main:app", host=args.host, port=args.port)
        return 0

    console = Console()
    form_cls = LoginForm if args.command == "login" else SignupForm

    with httpx.Client(base_url=args.base_url) as client:
        form = form_cls(client)
        fill_form(form, args.email)
        return submit_form(form, console)


if __name__ == "__main__":
    sys.exit(main())
