"""Domain models for users (read-only here)"""

from typing import FrozenSet
from pydantic import BaseModel, ConfigDict


class UserRef(BaseModel):
    """Id and username of a user referenced by another record"""
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class User(UserRef):
    """User with the names of its granted roles"""
    roles: FrozenSet[str] = frozenset()
