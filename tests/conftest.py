# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-blog-api")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ACTIVITY_SWEEP_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from blog_api.core.security import create_access_token, hash_password
from blog_api.db.session import Base
from blog_api.db.session import get_db as app_get_session
from blog_api.main import app as fastapi_app
from blog_api.models import Comment, Post, Quote, Tag, User, UserRole

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "password123"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _make_user(
    db_session: Session,
    email: str,
    role: UserRole = UserRole.USER,
    first_name: str = "Jonathan",
    last_name: str = "Doe",
) -> User:
    user = User(
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        role=role.value,
        first_name=first_name,
        last_name=last_name,
    )
    db_session.add(user)
    db_session.flush()
    db_session.refresh(user)
    return user


def _headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def test_user(db_session: Session) -> Iterator[User]:
    """Create and return a persisted standard user."""
    yield _make_user(db_session, "writer@example.com", first_name="Ada", last_name="Lovelace")


@pytest.fixture()
def other_user(db_session: Session) -> Iterator[User]:
    """Create and return a second standard user."""
    yield _make_user(db_session, "reader@example.com", first_name="Grace", last_name="Hopper")


@pytest.fixture()
def admin_user(db_session: Session) -> Iterator[User]:
    """Create and return an admin-level-one user."""
    yield _make_user(db_session, "moderator@example.com", role=UserRole.ADMIN_LEVEL_ONE)


@pytest.fixture()
def super_admin(db_session: Session) -> Iterator[User]:
    """Create and return an admin-level-two user."""
    yield _make_user(db_session, "owner@example.com", role=UserRole.ADMIN_LEVEL_TWO)


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return _headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return _headers(other_user)


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    return _headers(admin_user)


@pytest.fixture()
def super_admin_auth_token(super_admin: User) -> dict[str, str]:
    return _headers(super_admin)


@pytest.fixture()
def tag(db_session: Session) -> Iterator[Tag]:
    """Create a tag with no posts yet."""
    tag = Tag(name="python", post_count=0)
    db_session.add(tag)
    db_session.flush()
    db_session.refresh(tag)
    yield tag


@pytest.fixture()
def test_post(db_session: Session, test_user: User, tag: Tag) -> Iterator[Post]:
    """Create a baseline post authored by ``test_user`` under ``tag``."""
    post = Post(
        title="Hello world",
        content="First post content",
        cover="/uploads/posts/covers/hello.png",
        author=test_user,
        tag=tag,
    )
    tag.post_count += 1
    db_session.add(post)
    db_session.flush()
    db_session.refresh(post)
    yield post


@pytest.fixture()
def test_comment(db_session: Session, test_post: Post, other_user: User) -> Iterator[Comment]:
    """Create a comment by ``other_user`` on ``test_post``."""
    comment = Comment(content="Nice read", post=test_post, author=other_user)
    db_session.add(comment)
    db_session.flush()
    db_session.refresh(comment)
    yield comment


@pytest.fixture()
def quote(db_session: Session) -> Iterator[Quote]:
    quote = Quote(author="Seneca", text="Luck is what happens when preparation meets opportunity.")
    db_session.add(quote)
    db_session.flush()
    db_session.refresh(quote)
    yield quote
