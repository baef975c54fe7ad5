"""
User Model
"""
from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint
from sqlalchemy.orm import relationship
from proma.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    password = Column(String(255), nullable=False)
    is_pm = Column(Boolean, default=False, nullable=False)

    # Relationships
    board_memberships = relationship("BoardMember", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    project_memberships = relationship("ProjectMember", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    sessions = relationship("WorkSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("email LIKE '_%@%'", name="email_has_at"),
    )
