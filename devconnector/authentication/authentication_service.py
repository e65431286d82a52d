import os
import jwt
from typing import Any
from uuid import UUID
from starlette.datastructures import Headers

from devconnector.common.constants import AUTH_TOKEN_HEADER, JWT_ALGORITHM
from devconnector.common.environment_constants import JWT_SECRET
from devconnector.dto.user_context_dto import UserContextDto


class AuthenticationService:
    """
    Service responsible for authenticating HTTP requests.

    Accepts an HS256 JWT either in the `x-auth-token` header or as an
    `Authorization: Bearer` token. Tokens are issued elsewhere; this service
    only verifies them and extracts the caller's user id.
    """

    def __init__(self, logger, jwt_secret: str | None = None):
        """
        Initialize the AuthenticationService.

        Args:
            logger: A logger instance.
            jwt_secret (str | None): Signing secret. Falls back to the JWT_SECRET
                environment variable.
        """
        self.logger = logger
        self.jwt_secret = jwt_secret or os.getenv(JWT_SECRET)

    def authenticate_request(self, headers: Headers) -> UserContextDto | None:
        """
        Authenticate an incoming request.

        Args:
            headers (Headers): The request headers containing authentication information.

        Returns:
            UserContextDto | None: The caller, or None for an anonymous request.

        Raises:
            ValueError: If a token is present but invalid.
        """
        token = headers.get(AUTH_TOKEN_HEADER)

        if not token:
            auth_header = headers.get("Authorization")
            if auth_header and auth_header.startswith("Bearer "):
                token = auth_header.split(" ")[1]

        if not token:
            return None

        return self._build_context(self._verify_token(token))

    def _verify_token(self, token: str) -> dict[str, Any]:
        """
        Verify the token signature and decode its payload.

        Raises:
            RuntimeError: If no signing secret is configured.
            ValueError: If the token is malformed, expired or badly signed.
        """
        if not self.jwt_secret:
            raise RuntimeError("JWT_SECRET is not configured")

        try:
            return jwt.decode(token, key=self.jwt_secret, algorithms=[JWT_ALGORITHM])
        except jwt.PyJWTError as e:
            self.logger.warning("[AuthenticationService] token rejected: %s", str(e))
            raise ValueError(f"Token Invalid: {str(e)}")

    def _build_context(self, payload: dict[str, Any]) -> UserContextDto:
        """
        Build the UserContextDto from a payload shaped {"user": {"id": "<uuid>"}}.
        """
        try:
            user_id = UUID(str(payload["user"]["id"]))
        except (KeyError, TypeError, ValueError):
            raise ValueError("Token payload has no valid user id")

        return UserContextDto(user_id=user_id)
