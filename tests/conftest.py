import os
import tempfile

# Settings are read at import time, so the environment is prepared first
_DB_DIR = tempfile.mkdtemp(prefix="blog-api-tests-")
_DB_PATH = os.path.join(_DB_DIR, "test.db")
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ.pop("DB_URI", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from app.core.security import create_access_token, get_password_hash
from app.db.models import Base, Comment, Like, Post, User
from app.db.session import get_db
from main import app as fastapi_app

SYNC_DATABASE_URL = f"sqlite:///{_DB_PATH}"
TEST_PASSWORD = "secret123"

test_engine = create_async_engine(os.environ["DATABASE_URL"], poolclass=NullPool)
TestingSessionLocal = sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def override_get_db():
    async with TestingSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@pytest.fixture(scope="session")
def password_hash():
    """bcrypt is slow, hash the shared test password once"""
    return get_password_hash(TEST_PASSWORD)


@pytest.fixture
def sync_engine():
    """Fresh schema for every test"""
    engine = create_engine(SYNC_DATABASE_URL)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(sync_engine):
    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_user(sync_engine, password_hash):
    """Insert a user and return its id"""
    counter = {"n": 0}

    def _make(name=None, email=None):
        counter["n"] += 1
        name = name or f"user{counter['n']}"
        email = email or f"{name}@example.com"
        with Session(sync_engine) as session:
            user = User(name=name, email=email, password_hash=password_hash)
            session.add(user)
            session.commit()
            return user.id

    return _make


@pytest.fixture
def make_post(sync_engine):
    def _make(user_id, title="Title", content="Content"):
        with Session(sync_engine) as session:
            post = Post(user_id=user_id, title=title, content=content)
            session.add(post)
            session.commit()
            return post.id

    return _make


@pytest.fixture
def make_comment(sync_engine):
    def _make(post_id, user_id, content="Nice post"):
        with Session(sync_engine) as session:
            comment = Comment(post_id=post_id, user_id=user_id, content=content)
            session.add(comment)
            session.commit()
            return comment.id

    return _make


@pytest.fixture
def make_like(sync_engine):
    def _make(post_id, user_id):
        with Session(sync_engine) as session:
            like = Like(post_id=post_id, user_id=user_id)
            session.add(like)
            session.commit()
            return like.id

    return _make


@pytest.fixture
def count_rows(sync_engine):
    def _count(model):
        with Session(sync_engine) as session:
            return session.query(model).count()

    return _count


@pytest.fixture
def headers_for():
    """Authorization header carrying a freshly issued token for a user id"""
    def _headers(user_id):
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest.fixture
def user_id(make_user):
    return make_user("alice", "alice@example.com")


@pytest.fixture
def auth_headers(headers_for, user_id):
    return headers_for(user_id)
