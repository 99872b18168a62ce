import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# JWT
JWT_ALGORITHM = "HS256"
JWT_ROLES_CLAIM = "roles"
DEFAULT_JWT_EXPIRATION_MS = 24 * 60 * 60 * 1000  # 24 hours

# Roles
ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


def get_jwt_secret() -> str:
    """Get the shared HMAC secret used to sign tokens"""
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise ValueError("JWT_SECRET must be set")
    return secret


def get_jwt_expiration_ms() -> int:
    """Token lifetime in milliseconds"""
    return int(os.getenv("JWT_EXPIRATION_MS", str(DEFAULT_JWT_EXPIRATION_MS)))


def get_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if not url:
        raise ValueError("DATABASE_URL environment variable is not set")
    return url
