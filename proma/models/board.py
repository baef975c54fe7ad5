"""
Board Model
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from proma.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(35), nullable=False)

    # Relationships
    members = relationship("BoardMember", back_populates="board", cascade="all, delete-orphan", passive_deletes=True)
    projects = relationship("Project", back_populates="board", cascade="all, delete-orphan", passive_deletes=True)
