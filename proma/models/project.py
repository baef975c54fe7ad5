"""
Project Model
"""
from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum
from proma.database import Base


class ProjectStage(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(35), nullable=False)
    priority = Column(Integer, nullable=False)
    stage = Column(
        SQLEnum(ProjectStage, name="project_stage", values_callable=lambda stages: [s.value for s in stages]),
        default=ProjectStage.PENDING,
        nullable=False,
    )
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    board = relationship("Board", back_populates="projects")
    members = relationship("ProjectMember", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)
    sessions = relationship("WorkSession", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("priority BETWEEN 1 AND 5", name="priority_range"),
    )
