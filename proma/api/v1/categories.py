"""Category endpoints"""
from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from proma.authz import logged_in
from proma.database import get_db
from proma.dependencies import require
from proma.models import Category
from proma.schemas import CategoryResponse

router = APIRouter()


@router.get(
    "",
    response_model=Dict[str, List[CategoryResponse]],
    dependencies=[Depends(require(logged_in))],
)
def list_categories(db: Session = Depends(get_db)):
    categories = db.query(Category).order_by(Category.id).all()
    return {"categories": [CategoryResponse.model_validate(category) for category in categories]}
