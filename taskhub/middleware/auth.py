"""
Bearer token authentication

FastAPI dependency that turns the Authorization header into a Principal.
Every rejection looks the same to the client; the specific cause is only
logged.
"""
import logging
from typing import Optional
from fastapi import Header

from taskhub.errors import AuthenticationError
from taskhub.security.principal import Principal
from taskhub.security.tokens import get_token_provider

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "Full authentication is required to access this resource"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of a "Bearer <token>" header value.

    Raises:
        AuthenticationError: If the header is missing or not a bearer header
    """
    if not authorization:
        logger.warning("No Authorization header provided")
        raise AuthenticationError(AUTHENTICATION_REQUIRED)

    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        logger.warning("Invalid authorization header format. Expected 'Bearer <token>'")
        raise AuthenticationError(AUTHENTICATION_REQUIRED)

    if scheme.lower() != "bearer":
        logger.warning(f"Invalid authorization scheme: {scheme}")
        raise AuthenticationError(AUTHENTICATION_REQUIRED)

    return token.strip()


async def get_current_principal(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> Principal:
    """
    FastAPI dependency to extract and verify the bearer token.
    Returns the authenticated principal.
    """
    token = extract_bearer_token(authorization)

    provider = get_token_provider()
    if not provider.validate(token):
        raise AuthenticationError(AUTHENTICATION_REQUIRED)

    principal = provider.parse(token)
    logger.debug(f"Authenticated user: {principal.username}")
    return principal
