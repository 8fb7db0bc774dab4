"""Shared fixtures: an in-memory database and an API client bound to it."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.models import User, Course, Assignment
from app.utils.auth import create_access_token, get_password_hash
from main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(email="student@example.com", password="password123", name="Student"):
        user = User(email=email, hashed_password=get_password_hash(password), name=name)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def make_course(db_session):
    def _make_course(user, name="Algorithms", code="CS 3340"):
        course = Course(user_id=user.id, name=name, code=code)
        db_session.add(course)
        db_session.commit()
        db_session.refresh(course)
        return course
    return _make_course


@pytest.fixture
def make_assignment(db_session):
    def _make_assignment(course, title="Assignment", **fields):
        assignment = Assignment(course_id=course.id, title=title, **fields)
        db_session.add(assignment)
        db_session.commit()
        db_session.refresh(assignment)
        return assignment
    return _make_assignment
