"""SQLAlchemy ORM models"""

from taskhub.db.models.task import Task
from taskhub.db.models.user import Role, User, user_roles

__all__ = ["Task", "Role", "User", "user_roles"]
