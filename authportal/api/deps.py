# File: authportal/api/deps.py

import json
import logging

from fastapi import Request

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


async def get_json_body(request: Request) -> dict:
    """
    FastAPI dependency that returns the request body as a dict.

    Anything that is not a JSON object (empty body, broken JSON, a list,
    ``null``) comes back as ``{}`` so the route's own presence checks
    produce the error response.

    Usage in route functions:
        payload: dict = Depends(get_json_body)
    """
    raw = await request.body()
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError both land here
        logger.debug("Unparseable body on %s, treating as empty", request.url.path)
        return {}

    if not isinstance(body, dict):
        return {}
    return body
