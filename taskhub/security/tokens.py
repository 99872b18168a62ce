"""
HS256 bearer tokens.

Tokens carry the username as subject, the role names as one comma-joined
``roles`` claim, and issued-at / expiry timestamps. There is no refresh or
rotation: a token is good until it expires.
"""
import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from jose import JWTError, jwt

from taskhub import config
from taskhub.errors import AuthenticationError, ConfigurationError
from taskhub.security.principal import Principal

logger = logging.getLogger(__name__)


class TokenFailure(str, Enum):
    """Why a token was rejected (logged, never sent to the client)"""
    SIGNATURE = "signature"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    UNSUPPORTED = "unsupported"
    EMPTY_CLAIMS = "empty-claims"


class InvalidTokenError(AuthenticationError):
    """Token rejected for a specific, logged reason"""

    def __init__(self, failure: TokenFailure, message: str):
        self.failure = failure
        super().__init__(message)


class JwtTokenProvider:
    """Issues and verifies signed tokens with a shared secret"""

    def __init__(
        self,
        secret: str,
        expiration_ms: int = config.DEFAULT_JWT_EXPIRATION_MS,
        algorithm: str = config.JWT_ALGORITHM,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expiration = timedelta(milliseconds=expiration_ms)
        self._algorithm = algorithm

    def issue(
        self,
        username: str,
        roles: Iterable[str],
        issued_at: Optional[datetime] = None,
    ) -> str:
        """Create a token for an authenticated user and its granted roles"""
        now = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": username,
            config.JWT_ROLES_CLAIM: ",".join(roles),
            "iat": now,
            "exp": now + self._expiration,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def validate(self, token: Optional[str]) -> bool:
        """
        Check signature, structure and expiry.

        Never raises: every failure is logged with its category and reported
        as False.
        """
        try:
            self._decode(token)
            return True
        except InvalidTokenError as e:
            logger.error(f"{e.message} ({e.failure.value})")
        return False

    def parse(self, token: Optional[str]) -> Principal:
        """
        Build the principal described by a token.

        Raises:
            InvalidTokenError: If the token does not validate
        """
        claims = self._decode(token)
        roles = frozenset(
            role for role in claims[config.JWT_ROLES_CLAIM].split(",") if role
        )
        return Principal(username=claims["sub"], roles=roles)

    def get_username(self, token: Optional[str]) -> str:
        return self._decode(token)["sub"]

    def _decode(self, token: Optional[str]) -> Dict[str, Any]:
        if not token or not token.strip():
            raise InvalidTokenError(TokenFailure.EMPTY_CLAIMS, "JWT claims string is empty")

        try:
            header = jwt.get_unverified_header(token)
        except JWTError:
            raise InvalidTokenError(TokenFailure.MALFORMED, "Invalid JWT token")

        if header.get("alg") != self._algorithm:
            raise InvalidTokenError(TokenFailure.UNSUPPORTED, "Unsupported JWT token")

        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError(TokenFailure.EXPIRED, "Expired JWT token")
        except jwt.JWTClaimsError:
            raise InvalidTokenError(TokenFailure.MALFORMED, "Invalid JWT claims")
        except JWTError as e:
            if "Signature verification failed" in str(e):
                raise InvalidTokenError(TokenFailure.SIGNATURE, "Invalid JWT signature")
            raise InvalidTokenError(TokenFailure.MALFORMED, "Invalid JWT token")

        if not claims.get("sub"):
            raise InvalidTokenError(TokenFailure.EMPTY_CLAIMS, "JWT claims string is empty")
        if not isinstance(claims.get(config.JWT_ROLES_CLAIM), str):
            raise InvalidTokenError(TokenFailure.MALFORMED, "Invalid JWT claims")
        return claims


_token_provider: Optional[JwtTokenProvider] = None


def get_token_provider() -> JwtTokenProvider:
    """Get or create the token provider singleton"""
    global _token_provider

    if _token_provider is None:
        try:
            secret = config.get_jwt_secret()
        except ValueError as e:
            logger.error(f"Configuration error: {str(e)}")
            raise ConfigurationError("Authentication is not properly configured")
        _token_provider = JwtTokenProvider(secret, config.get_jwt_expiration_ms())

    return _token_provider


def reset_token_provider():
    """Reset the token provider singleton (useful for testing)"""
    global _token_provider
    _token_provider = None
