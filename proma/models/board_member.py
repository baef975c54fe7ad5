"""
Board Member Model
"""
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from proma.database import Base


class BoardMember(Base):
    __tablename__ = "boards_users"

    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)

    # Relationships
    board = relationship("Board", back_populates="members")
    user = relationship("User", back_populates="board_memberships")
