"""Fayda token exchange service.

Implements the RFC 6749 token endpoint interaction with PKCE (RFC 7636)
and private key JWT client authentication (RFC 7523).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from fayda.models.errors import RemoteApiError
from fayda.models.tokens import TokenRequest, TokenResponse
from fayda.services.http import raise_for_provider_error, send_request

logger = logging.getLogger(__name__)


class FaydaTokenManager:
    """Exchanges authorization codes for tokens at the Fayda token endpoint.

    Uses application/x-www-form-urlencoded encoding as required by
    RFC 6749. No retries: failures surface to the caller immediately.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the token manager.

        Args:
            timeout: HTTP request timeout in seconds
            http_client: Shared client to use instead of creating one; left
                open by ``close()``
        """
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def exchange_code_for_token(
        self,
        token_request: TokenRequest,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> TokenResponse:
        """Exchange an authorization code for an access token.

        Args:
            token_request: Token exchange request parameters
            timeout: Per-call timeout overriding the client default

        Returns:
            TokenResponse carrying an access token

        Raises:
            RemoteApiError: If the provider rejects the request or returns
                no access token
            TransportError: If the request fails at the network level
        """
        logger.debug(f"Exchanging authorization code at {token_request.token_endpoint}")

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }

        form_data = token_request.to_form_data()

        # Log request details (without sensitive data)
        logger.debug(
            f"Token request: grant_type={form_data['grant_type']}, "
            f"client_id={form_data['client_id']}, "
            f"redirect_uri={form_data['redirect_uri']}"
        )

        response = await send_request(
            self._http_client,
            "POST",
            token_request.token_endpoint,
            data=form_data,
            headers=headers,
            timeout=timeout,
        )

        raise_for_provider_error(response)
        return self._parse_token_response(response)

    def _parse_token_response(self, response: httpx.Response) -> TokenResponse:
        try:
            response_data = response.json()
            token_response = TokenResponse.model_validate(response_data)
        except (ValueError, ValidationError) as e:
            raise RemoteApiError(
                f"Invalid token response format: {e}",
                status_code=response.status_code,
            ) from e

        if not token_response.is_success():
            raise RemoteApiError(
                token_response.error_description
                or token_response.error
                or "Token response missing required access_token",
                status_code=response.status_code,
                error=token_response.error,
                error_description=token_response.error_description,
            )

        logger.info("Token exchange successful")
        return token_response

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()
