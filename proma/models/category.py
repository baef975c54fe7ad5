"""Category reference data"""
from sqlalchemy import Column, Integer, String, event, insert

from proma.database import Base

DEFAULT_CATEGORIES = (
    "internal_meeting",
    "external_meeting",
    "data_entry",
    "pulling_data",
    "research",
    "outreach",
    "preparation",
    "development",
    "review",
    "analytics",
    "other",
    "available",
)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False)


@event.listens_for(Category.__table__, "after_create")
def _seed_categories(target, connection, **kw):
    connection.execute(insert(target), [{"name": name} for name in DEFAULT_CATEGORIES])
