"""Users feature module (lookups only)"""

from taskhub.features.users.domain import User, UserRef
from taskhub.features.users.repository import UserRepository
from taskhub.features.users.service import UserService

__all__ = ["User", "UserRef", "UserRepository", "UserService"]
