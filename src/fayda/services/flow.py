"""Fayda authorization flow orchestration service.

Builds the PKCE protected authorization URL the user is redirected to, and
processes the provider's redirect back to the application.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlparse

from fayda.models.config import ClientConfig
from fayda.models.environments import DEFAULT_SCOPES, ESSENTIAL_CLAIMS
from fayda.models.errors import (
    AuthorizationCallbackError,
    AuthorizationError,
    StateValidationError,
)
from fayda.models.flow import (
    AuthorizationParameters,
    AuthorizationRequest,
    AuthorizationResponse,
)
from fayda.primitives.pkce import generate_pair, generate_state, validate_state

logger = logging.getLogger(__name__)


class FaydaFlowManager:
    """Orchestrates the authorization half of the Fayda code flow.

    Handles:
    - PKCE parameter generation
    - State parameter generation and validation (CSRF protection)
    - Authorization URL construction with ACR values and essential claims
    - Callback URL parsing and validation

    Holds no session state; the caller keeps the verifier and state.
    """

    def build_authorization_url(
        self,
        config: ClientConfig,
        scope: str | None = None,
        state: str | None = None,
        redirect_uri: str | None = None,
    ) -> AuthorizationRequest:
        """Build the authorization URL for a new login.

        Args:
            config: Client configuration
            scope: Space-separated scopes, defaults to ``DEFAULT_SCOPES``
            state: CSRF state to use verbatim, generated when omitted
            redirect_uri: Overrides the configured redirect URI

        Returns:
            AuthorizationRequest with the URL, the code verifier to store for
            the token exchange, and the state to check on callback

        Raises:
            ConfigError: If no redirect URI is configured or given
        """
        uri = config.resolve_redirect_uri(redirect_uri)

        pkce = generate_pair()
        resolved_state = state or generate_state()
        endpoints = config.endpoints

        params = AuthorizationParameters(
            authorization_endpoint=endpoints.authorization_endpoint,
            client_id=config.client_id,
            scope=scope or DEFAULT_SCOPES,
            redirect_uri=uri,
            state=resolved_state,
            code_challenge=pkce.code_challenge,
            code_challenge_method=pkce.code_challenge_method,
            acr_values=endpoints.acr_values,
            claims=ESSENTIAL_CLAIMS,
        )

        url = params.build_authorization_url()

        logger.info(
            f"Generated authorization URL for client {config.client_id} "
            f"({config.environment.value})"
        )

        return AuthorizationRequest(
            url=url, code_verifier=pkce.code_verifier, state=resolved_state
        )

    def handle_authorization_callback(
        self,
        callback_url: str,
        expected_state: str,
    ) -> AuthorizationResponse:
        """Handle the provider's redirect back to the application.

        Parses the callback URL, validates the state parameter for CSRF
        protection and checks that an authorization code was issued.

        Args:
            callback_url: Full callback URL received from the provider
            expected_state: State returned by ``build_authorization_url``

        Returns:
            AuthorizationResponse carrying the authorization code

        Raises:
            StateValidationError: If state is missing or doesn't match
            AuthorizationError: If the provider reported an error
            AuthorizationCallbackError: If the callback URL is malformed
        """
        auth_response = self._parse_callback_url(callback_url)

        if auth_response.state is None:
            raise StateValidationError(
                "Authorization server callback missing required state parameter"
            )

        validate_state(expected_state, auth_response.state)

        if auth_response.is_error():
            logger.warning(
                f"Authorization callback contained error: {auth_response.error} - "
                f"{auth_response.error_description}"
            )
            raise AuthorizationError(
                f"Authorization failed: {auth_response.error} "
                f"({auth_response.error_description or ''})"
            )

        if not auth_response.is_success():
            raise AuthorizationCallbackError("Missing authorization code")

        logger.info("Authorization callback successful - received authorization code")
        return auth_response

    def _parse_callback_url(self, callback_url: str) -> AuthorizationResponse:
        try:
            parsed = urlparse(callback_url)
            query_params = parse_qs(parsed.query)
        except (TypeError, ValueError) as e:
            raise AuthorizationCallbackError(
                f"Failed to parse callback URL: {e}"
            ) from e

        # Extract single values from query parameter lists
        def get_single_param(key: str) -> str | None:
            values = query_params.get(key, [])
            return values[0] if values else None

        return AuthorizationResponse(
            code=get_single_param("code"),
            state=get_single_param("state"),
            error=get_single_param("error"),
            error_description=get_single_param("error_description"),
            error_uri=get_single_param("error_uri"),
        )


def build_authorization_url(
    config: ClientConfig,
    scope: str | None = None,
    state: str | None = None,
    redirect_uri: str | None = None,
) -> AuthorizationRequest:
    """Build an authorization URL with a default ``FaydaFlowManager``."""
    return FaydaFlowManager().build_authorization_url(
        config, scope=scope, state=state, redirect_uri=redirect_uri
    )
