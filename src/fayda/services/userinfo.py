"""Fayda userinfo service (OIDC Core Section 5.3)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fayda.models.errors import RemoteApiError
from fayda.primitives.claims import decode_payload
from fayda.services.http import raise_for_provider_error, send_request

logger = logging.getLogger(__name__)


class FaydaUserInfoClient:
    """Fetches the authenticated user's claims from the userinfo endpoint.

    Fayda answers with a signed JWT (``application/jwt``) whose payload
    holds the claims. Plain JSON object bodies are returned unchanged and
    are not checked against the OIDC claim shape.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def fetch_user_info(
        self,
        userinfo_endpoint: str,
        access_token: str,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> dict[str, Any]:
        """GET the userinfo endpoint with a bearer token.

        Args:
            userinfo_endpoint: Userinfo endpoint URL
            access_token: Access token from the token exchange
            timeout: Per-call timeout overriding the client default

        Returns:
            User claims

        Raises:
            RemoteApiError: If the provider rejects the request or the body
                is neither a JWT nor a JSON object
            MalformedTokenError: If a JWT body cannot be decoded
            TransportError: If the request fails at the network level
        """
        logger.debug(f"Fetching user info from {userinfo_endpoint}")

        response = await send_request(
            self._http_client,
            "GET",
            userinfo_endpoint,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/jwt, application/json",
            },
            timeout=timeout,
        )

        raise_for_provider_error(response)
        body = self._read_body(response)

        if isinstance(body, str):
            claims = decode_payload(body)
        elif isinstance(body, dict):
            claims = body
        else:
            raise RemoteApiError(
                f"Unexpected userinfo response of type {type(body).__name__}",
                status_code=response.status_code,
            )

        logger.info("User info retrieved")
        return claims

    def _read_body(self, response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        text = response.text.strip()

        if "json" not in content_type and not text.startswith(("{", '"')):
            return text

        try:
            return response.json()
        except ValueError:
            # JWT bodies are sometimes labelled as JSON
            return text

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()
