"""Database layer"""

from taskhub.db.base import Base
from taskhub.db.session import get_db, get_engine, reset_engine

__all__ = ["Base", "get_db", "get_engine", "reset_engine"]
