"""Authentication endpoints"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from proma.database import get_db
from proma.errors import BadRequestError, UnauthorizedError
from proma.models import User
from proma.schemas import AuthResponse, UserLogin, UserRegister, UserResponse
from proma.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for an access token."""
    user = db.query(User).filter(User.email == credentials.email).first()
    if user is None or not verify_password(credentials.password, user.password):
        raise UnauthorizedError("Invalid email/password")
    return AuthResponse(token=create_access_token(user), user=UserResponse.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Create an account and return a token for it."""
    if db.query(User.id).filter(User.email == user_data.email).first() is not None:
        raise BadRequestError("duplicate email")

    user = User(
        email=user_data.email,
        password=hash_password(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        is_pm=user_data.is_pm,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError("duplicate email")
    db.refresh(user)
    logger.info("Registered user %s (pm=%s)", user.id, user.is_pm)
    return AuthResponse(token=create_access_token(user), user=UserResponse.model_validate(user))
