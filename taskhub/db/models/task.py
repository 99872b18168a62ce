"""SQLAlchemy ORM model for tasks table"""

from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey
from sqlalchemy.orm import relationship

from taskhub.db.base import Base


class Task(Base):
    """
    SQLAlchemy ORM model for the tasks table.
    Creator and assignee both reference users.id.
    """
    __tablename__ = "tasks"

    # Primary key
    id = Column(Integer, primary_key=True, index=True)

    # Task information
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(Date, nullable=False)
    # Stored as the status name: TODO, IN_PROGRESS or COMPLETED
    status = Column(String(20), nullable=False, default="TODO", index=True)

    # Relationships
    created_by_id = Column("created_by", Integer, ForeignKey("users.id"), nullable=False, index=True)
    assigned_to_id = Column("assigned_to", Integer, ForeignKey("users.id"), nullable=True, index=True)

    created_by = relationship("User", foreign_keys=[created_by_id], lazy="joined")
    assigned_to = relationship("User", foreign_keys=[assigned_to_id], lazy="joined")

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
