"""
Work Session Model
"""
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from proma.database import Base


class WorkSession(Base):
    """A timed work-log entry on a project, authored by one user."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    start_datetime = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    end_datetime = Column(DateTime(timezone=True), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    comment = Column(Text, nullable=True)

    # Relationships
    project = relationship("Project", back_populates="sessions")
    user = relationship("User", back_populates="sessions")
    category = relationship("Category")

    __table_args__ = (
        CheckConstraint("end_datetime IS NULL OR start_datetime <= end_datetime", name="session_ends_after_start"),
    )
