"""Resolves authenticated callers and referenced users to user records"""

import logging

from taskhub.errors import ResourceNotFoundError
from taskhub.features.users.domain import User
from taskhub.features.users.repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Lookups every authorization decision depends on"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def resolve(self, username: str) -> User:
        """
        Map an authenticated username to its user record.

        Raises:
            ResourceNotFoundError: If no user has that username
        """
        user = await self.repository.find_by_username(username)
        if user is None:
            logger.warning(f"Authenticated user {username!r} has no user record")
            raise ResourceNotFoundError(resource_name="User", field_name="username", field_value=username)
        return user

    async def get_by_id(self, user_id: int) -> User:
        """
        Raises:
            ResourceNotFoundError: If no user has that id
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(resource_name="User", field_name="id", field_value=user_id)
        return user
