"""
Task authorization policy.

Role names are mapped to permissions in one table; everything else is
decided from the caller's id and the task's creator / assignee ids. No I/O.
"""
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict

from taskhub.config import ROLE_ADMIN, ROLE_USER


class Permission(str, Enum):
    """Permissions that reach beyond the caller's own tasks"""
    VIEW_ANY_TASK = "tasks:view_any"
    UPDATE_ANY_TASK = "tasks:update_any"
    REASSIGN_ANY_TASK = "tasks:reassign_any"
    DELETE_ANY_TASK = "tasks:delete_any"


ROLE_PERMISSIONS: Dict[str, FrozenSet[Permission]] = {
    ROLE_ADMIN: frozenset(Permission),
    ROLE_USER: frozenset(),
}


def permissions_for(roles: Iterable[str]) -> FrozenSet[Permission]:
    """Union of the permissions granted by each role; unknown roles grant nothing"""
    granted: set = set()
    for role in roles:
        granted |= ROLE_PERMISSIONS.get(role, frozenset())
    return frozenset(granted)


class TaskAccess(BaseModel):
    """What one user may do with tasks"""
    model_config = ConfigDict(frozen=True)

    user_id: int
    permissions: FrozenSet[Permission] = frozenset()

    @classmethod
    def for_user(cls, user_id: int, roles: Iterable[str]) -> "TaskAccess":
        return cls(user_id=user_id, permissions=permissions_for(roles))

    @property
    def sees_all_tasks(self) -> bool:
        return Permission.VIEW_ANY_TASK in self.permissions

    def is_creator(self, creator_id: int) -> bool:
        return creator_id == self.user_id

    def is_assigned(self, assignee_id: Optional[int]) -> bool:
        # an unassigned task is nobody's
        return assignee_id is not None and assignee_id == self.user_id

    def can_read(self, creator_id: int, assignee_id: Optional[int]) -> bool:
        return (
            self.sees_all_tasks
            or self.is_creator(creator_id)
            or self.is_assigned(assignee_id)
        )

    def can_update(self, creator_id: int, assignee_id: Optional[int]) -> bool:
        return (
            Permission.UPDATE_ANY_TASK in self.permissions
            or self.is_creator(creator_id)
            or self.is_assigned(assignee_id)
        )

    def can_reassign(self, creator_id: int) -> bool:
        return Permission.REASSIGN_ANY_TASK in self.permissions or self.is_creator(creator_id)

    def can_delete(self, creator_id: int) -> bool:
        return Permission.DELETE_ANY_TASK in self.permissions or self.is_creator(creator_id)
