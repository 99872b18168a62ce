"""Authenticated caller attached to a request"""
from typing import FrozenSet
from pydantic import BaseModel, ConfigDict


class Principal(BaseModel):
    """Username and role names taken from a validated bearer token"""
    model_config = ConfigDict(frozen=True)

    username: str
    roles: FrozenSet[str] = frozenset()
