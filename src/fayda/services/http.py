"""HTTP helpers shared by the token and userinfo services.

Maps httpx failures onto the client's error taxonomy: responses with a
non-success status become ``RemoteApiError``, requests that never complete
become ``TransportError``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from fayda.models.errors import (
    RemoteApiError,
    RequestCancelledError,
    RequestTimeoutError,
    TransportError,
)

logger = logging.getLogger(__name__)


async def send_request(
    http_client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    """Send a request, translating transport failures.

    Raises:
        RequestTimeoutError: If the request timed out
        RequestCancelledError: If the awaiting task was cancelled
        TransportError: For any other network-level failure
    """
    try:
        return await http_client.request(method, url, **kwargs)
    except httpx.TimeoutException as e:
        raise RequestTimeoutError(f"Request to {url} timed out: {e}") from e
    except httpx.RequestError as e:
        raise TransportError(f"Request to {url} failed: {e}") from e
    except asyncio.CancelledError as e:
        raise RequestCancelledError(f"Request to {url} was cancelled") from e


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def raise_for_provider_error(response: httpx.Response) -> None:
    """Raise ``RemoteApiError`` if the response has a non-success status.

    The message prefers the provider's ``error_description``, then its
    ``error`` code, then a generic status line.
    """
    if is_success(response):
        return

    try:
        error_data = response.json()
    except ValueError:
        error_data = None
    if not isinstance(error_data, dict):
        error_data = {}

    error_code = error_data.get("error")
    error_description = error_data.get("error_description")
    message = (
        error_description
        or error_code
        or f"Request failed with status code {response.status_code}"
    )

    logger.error(
        f"Fayda API error {response.status_code}: {error_code or 'unknown_error'} - "
        f"{error_description or 'No description provided'}"
    )

    raise RemoteApiError(
        message,
        status_code=response.status_code,
        error=error_code,
        error_description=error_description,
    )
