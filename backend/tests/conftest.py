import os
from dataclasses import dataclass
from datetime import datetime, timezone

# Keep the app's own engine off disk; tests use test_engine below
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from quora.dao.question_dao import QuestionDao  # noqa: E402
from quora.dao.user_dao import UserDao  # noqa: E402
from quora.database import get_session  # noqa: E402
from quora.main import app  # noqa: E402
from quora.models.user import User, UserRole  # noqa: E402
from quora.models.user_auth import UserAuth  # noqa: E402
from quora.services.question_service import QuestionService  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# sqlite:///:memory: with StaticPool so ALL sessions share the same DB
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

FIXED_NOW = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on fresh tables"""
    from quora.models.question import Question  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session"""
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@dataclass
class Actors:
    """Users and their access tokens for authorization tests"""

    owner: User
    other: User
    admin: User
    owner_token: str = "token-owner"
    other_token: str = "token-other"
    admin_token: str = "token-admin"
    signed_out_token: str = "token-signed-out"


def _make_user(session: Session, name: str, role: UserRole = UserRole.nonadmin) -> User:
    user = User(
        uuid=f"user-{name}",
        username=name,
        first_name=name.capitalize(),
        last_name="Tester",
        email=f"{name}@example.com",
        role=role,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def _sign_in(session: Session, user: User, token: str, logout_at: datetime = None) -> UserAuth:
    auth = UserAuth(
        uuid=f"auth-{token}",
        user_id=user.id,
        access_token=token,
        login_at=datetime(2026, 1, 15, 8, 0),
        logout_at=logout_at,
    )
    session.add(auth)
    session.commit()
    session.refresh(auth)
    return auth


@pytest.fixture
def actors(session: Session) -> Actors:
    """Owner U1, other user U2 and admin U3, each signed in; plus a signed-out session for U1"""
    owner = _make_user(session, "alice")
    other = _make_user(session, "bob")
    admin = _make_user(session, "carol", role=UserRole.admin)

    result = Actors(owner=owner, other=other, admin=admin)
    _sign_in(session, owner, result.owner_token)
    _sign_in(session, other, result.other_token)
    _sign_in(session, admin, result.admin_token)
    _sign_in(session, owner, result.signed_out_token, logout_at=datetime(2026, 1, 15, 9, 0))
    return result


class SequentialIds:
    """Deterministic id generator: q-1, q-2, ..."""

    def __init__(self, prefix: str = "q"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


@pytest.fixture
def service(session: Session) -> QuestionService:
    """Gateway over real DAOs with a fixed clock and sequential ids"""
    return QuestionService(
        user_dao=UserDao(session),
        question_dao=QuestionDao(session),
        clock=lambda: FIXED_NOW,
        id_generator=SequentialIds(),
    )
