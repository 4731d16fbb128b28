"""Fayda OIDC client orchestration.

Coordinates authorization URL generation, client assertion signing, token
exchange and userinfo retrieval into the Fayda login flow.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fayda.models.config import ClientConfig
from fayda.models.environments import Environment
from fayda.models.errors import ValidationError
from fayda.models.flow import AuthorizationRequest, AuthorizationResponse
from fayda.models.tokens import TokenRequest
from fayda.primitives.assertion import sign_client_assertion
from fayda.services.flow import FaydaFlowManager
from fayda.services.tokens import FaydaTokenManager
from fayda.services.userinfo import FaydaUserInfoClient

logger = logging.getLogger(__name__)


class FaydaClient:
    """OAuth2/OIDC authorization code + PKCE client for Fayda.

    Usage::

        async with FaydaClient(config) as client:
            request = client.get_authorization_url()
            # redirect to request.url, keep request.code_verifier and state
            ...
            user = await client.exchange_code_for_user(code, code_verifier)

    The client holds no per-login state, so one instance can serve
    concurrent logins.
    """

    def __init__(
        self,
        config: ClientConfig,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the Fayda client.

        Args:
            config: Validated client configuration
            timeout: HTTP request timeout in seconds
            http_client: Optional shared HTTP client; closed by ``close()``
                only when created here
        """
        self.config = config
        self.timeout = timeout

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

        # Initialize service components
        self.flow_manager = FaydaFlowManager()
        self.token_manager = FaydaTokenManager(
            timeout=timeout, http_client=self._http_client
        )
        self.userinfo_client = FaydaUserInfoClient(
            timeout=timeout, http_client=self._http_client
        )

    @classmethod
    def create(
        cls,
        client_id: str,
        private_key: str,
        environment: Environment | str = Environment.UAT,
        redirect_uri: str | None = None,
        timeout: float = 30.0,
    ) -> FaydaClient:
        """Build a client straight from its configuration values.

        Raises:
            ConfigError: If the configuration is invalid
        """
        config = ClientConfig(
            client_id=client_id,
            private_key=private_key,
            environment=environment,
            redirect_uri=redirect_uri,
        )
        return cls(config, timeout=timeout)

    def get_authorization_url(
        self,
        scope: str | None = None,
        state: str | None = None,
        redirect_uri: str | None = None,
    ) -> AuthorizationRequest:
        """Generate the login URL and its PKCE verifier.

        Raises:
            ConfigError: If no redirect URI is available
        """
        return self.flow_manager.build_authorization_url(
            self.config, scope=scope, state=state, redirect_uri=redirect_uri
        )

    def handle_authorization_callback(
        self, callback_url: str, expected_state: str
    ) -> AuthorizationResponse:
        """Validate the provider's redirect and extract the authorization code."""
        return self.flow_manager.handle_authorization_callback(
            callback_url, expected_state
        )

    async def exchange_code_for_user(
        self,
        code: str,
        code_verifier: str,
        redirect_uri: str | None = None,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> dict[str, Any]:
        """Exchange the authorization code for the user's identity claims.

        Performs, strictly in order:
        1. Sign a client assertion for the token endpoint
        2. Exchange the code for an access token
        3. Fetch and decode the userinfo response

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier stored when the URL was built
            redirect_uri: Must match the one used for the authorization URL
            timeout: Per-call timeout applied to each HTTP request

        Returns:
            User profile claims

        Raises:
            ValidationError: If code or code_verifier is empty
            ConfigError: If no redirect URI is available
            KeyImportError: If the private key cannot be imported
            RemoteApiError: If the provider returns an error response
            TransportError: If a request fails at the network level
        """
        if not code:
            raise ValidationError("Authorization code is required")
        if not code_verifier:
            raise ValidationError("PKCE code_verifier is required")

        uri = self.config.resolve_redirect_uri(redirect_uri)
        endpoints = self.config.endpoints

        # 1. Client assertion (private key JWT)
        client_assertion = sign_client_assertion(
            self.config.client_id,
            endpoints.token_endpoint,
            self.config.private_key,
        )

        # 2. Access token
        token_request = TokenRequest(
            token_endpoint=endpoints.token_endpoint,
            code=code,
            redirect_uri=uri,
            client_id=self.config.client_id,
            client_assertion=client_assertion,
            code_verifier=code_verifier,
        )
        token_response = await self.token_manager.exchange_code_for_token(
            token_request, timeout=timeout
        )

        # 3. User info
        user = await self.userinfo_client.fetch_user_info(
            endpoints.userinfo_endpoint,
            token_response.access_token,
            timeout=timeout,
        )

        logger.info(f"Retrieved Fayda user profile for client {self.config.client_id}")
        return user

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> FaydaClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


async def exchange_code_for_user(
    config: ClientConfig,
    code: str,
    code_verifier: str,
    redirect_uri: str | None = None,
    timeout: float = 30.0,
) -> dict[str, Any]:
    """One-shot code exchange using a short-lived ``FaydaClient``."""
    async with FaydaClient(config, timeout=timeout) as client:
        return await client.exchange_code_for_user(code, code_verifier, redirect_uri)
