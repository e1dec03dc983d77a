"""
Pytest configuration and fixtures for testing.
Uses an in-memory SQLite database shared across connections.
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizbro.database import Base, get_db, init_db
from quizbro.main import app
from quizbro.api.deps import get_now
from quizbro.models import Profile, Quiz, Question, Response

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def naive(dt):
    """Database columns hold naive UTC"""
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Database session bound to the test engine."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """Test client with the database and clock overridden."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: NOW
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_profile(db):
    """Insert a profile directly (no password flow)."""
    def _make(email=None, role="student"):
        profile = Profile(
            email=email or f"{uuid.uuid4().hex[:8]}@example.com",
            password_hash="not-a-real-hash",
            role=role
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile
    return _make


@pytest.fixture
def make_quiz(db):
    """Insert a quiz owned by the given teacher."""
    counter = {"n": 0}
    
    def _make(owner, title="Quiz", published=True, scheduled_for=None,
              duration=30, questions=0, created_at=None):
        counter["n"] += 1
        quiz = Quiz(
            title=title,
            description=f"{title} description",
            duration=duration,
            is_published=published,
            scheduled_for=naive(scheduled_for) if scheduled_for else None,
            created_by=owner.id,
            created_at=naive(created_at or NOW - timedelta(days=30) + timedelta(minutes=counter["n"]))
        )
        db.add(quiz)
        db.flush()
        for position in range(questions):
            db.add(Question(quiz_id=quiz.id, question_text=f"Q{position + 1}", position=position))
        db.commit()
        db.refresh(quiz)
        return quiz
    return _make


@pytest.fixture
def make_response(db):
    """Insert a response for a student."""
    def _make(quiz, student, total_marks, submitted_at=None):
        response = Response(
            quiz_id=quiz.id,
            user_id=student.id,
            total_marks=total_marks,
            submitted_at=naive(submitted_at or NOW - timedelta(hours=1))
        )
        db.add(response)
        db.commit()
        db.refresh(response)
        return response
    return _make


def signup(client, email, role, password="secret123"):
    """Register through the API and return auth headers."""
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "role": role}
    )
    assert response.status_code == 201, response.text
    return response.json(), {"Authorization": f"Bearer {response.json()['token']}"}
