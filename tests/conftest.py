from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from proma.authz import Actor, RequestContext, actor_from_claims
from proma.database import Base, get_db
from proma.main import app
from proma.models import Board, BoardMember, Project, ProjectMember, User, WorkSession
from proma.security import create_access_token, hash_password

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session: Session) -> TestClient:
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class Factory:
    """Builds graph fixtures straight through the ORM."""

    def __init__(self, db: Session):
        self.db = db
        self._count = 0

    def user(self, name: Optional[str] = None, is_pm: bool = False, password: str = "password") -> User:
        self._count += 1
        name = name or f"user{self._count}"
        user = User(
            email=f"{name}@example.com",
            first_name=name.capitalize(),
            last_name="Tester",
            password=hash_password(password),
            is_pm=is_pm,
        )
        self.db.add(user)
        self.db.commit()
        return user

    def board(self, title: str = "Board", members=()) -> Board:
        board = Board(title=title)
        self.db.add(board)
        self.db.flush()
        for member in members:
            self.db.add(BoardMember(board_id=board.id, user_id=member.id))
        self.db.commit()
        return board

    def join_board(self, user: User, board: Board) -> None:
        self.db.add(BoardMember(board_id=board.id, user_id=user.id))
        self.db.commit()

    def project(self, board: Board, name: str = "Project", priority: int = 3, members=()) -> Project:
        project = Project(name=name, priority=priority, board_id=board.id)
        self.db.add(project)
        self.db.flush()
        for member in members:
            self.db.add(ProjectMember(project_id=project.id, user_id=member.id))
        self.db.commit()
        return project

    def session(
        self,
        project: Project,
        user: User,
        category_id: int = 1,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        comment: Optional[str] = None,
    ) -> WorkSession:
        session = WorkSession(
            project_id=project.id,
            user_id=user.id,
            category_id=category_id,
            start_datetime=start or datetime(2024, 3, 1, 9, 0, 0),
            end_datetime=end,
            comment=comment,
        )
        self.db.add(session)
        self.db.commit()
        return session


@pytest.fixture
def factory(db_session: Session) -> Factory:
    return Factory(db_session)


def actor_for(user: User) -> Actor:
    return actor_from_claims(user.id, user.email, user.is_pm)


@pytest.fixture
def context(db_session: Session):
    """Build a ``RequestContext`` for ``user`` (or an anonymous one) with id params."""

    def _context(user: Optional[User] = None, **params) -> RequestContext:
        actor = actor_for(user) if user is not None else None
        return RequestContext(db=db_session, actor=actor, params=params)

    return _context


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _headers
