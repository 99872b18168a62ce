"""SQLAlchemy repository for user lookups"""

import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.db.models.user import User as UserORM
from taskhub.features.users.domain import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Read-only access to users and their roles"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(UserORM).where(UserORM.username == username))
        orm_user = result.scalar_one_or_none()
        return self._to_domain_model(orm_user) if orm_user else None

    async def find_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(UserORM).where(UserORM.id == user_id))
        orm_user = result.scalar_one_or_none()
        return self._to_domain_model(orm_user) if orm_user else None

    def _to_domain_model(self, orm_user: UserORM) -> User:
        return User(
            id=orm_user.id,
            username=orm_user.username,
            roles=frozenset(role.name for role in orm_user.roles),
        )
