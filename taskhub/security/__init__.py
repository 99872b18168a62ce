"""Authentication and authorization"""
from taskhub.security.principal import Principal
from taskhub.security.policy import Permission, ROLE_PERMISSIONS, TaskAccess, permissions_for
from taskhub.security.tokens import (
    InvalidTokenError,
    JwtTokenProvider,
    TokenFailure,
    get_token_provider,
    reset_token_provider,
)

__all__ = [
    'Principal',
    'Permission',
    'ROLE_PERMISSIONS',
    'TaskAccess',
    'permissions_for',
    'InvalidTokenError',
    'JwtTokenProvider',
    'TokenFailure',
    'get_token_provider',
    'reset_token_provider',
]
