"""
Project Member Model
"""
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from proma.database import Base


class ProjectMember(Base):
    __tablename__ = "projects_users"

    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)

    # Relationships
    project = relationship("Project", back_populates="members")
    user = relationship("User", back_populates="project_memberships")
