"""
Shared fixtures: an in-memory SQLite store wired into the app
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from quiz_api import models  # noqa: E402
from quiz_api.database import Base, build_engine, get_db  # noqa: E402
from quiz_api.main import app  # noqa: E402


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for seeding and inspecting rows; always commit seeds"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def quiz_factory(db):
    """Insert a test row (with optional questions) directly"""

    def make(title="Seeded quiz", questions=(), created_at=None, **fields):
        quiz = models.Test(
            title=title,
            question_count=len(questions),
            total_points=len(questions),
            created_at=created_at or datetime.now(timezone.utc),
            **fields
        )
        db.add(quiz)
        db.flush()
        for index, text in enumerate(questions):
            db.add(models.Question(
                test_id=quiz.id,
                question_text=text,
                options=["A", "B"],
                correct_answer="0",
                points=1,
                order_index=index
            ))
        db.commit()
        db.refresh(quiz)
        return quiz

    return make


@pytest.fixture
def tags(db):
    """Two active tags and one inactive one"""
    rows = [
        models.Tag(name="python", is_active=True),
        models.Tag(name="algorithms", is_active=True),
        models.Tag(name="legacy", is_active=False),
    ]
    db.add_all(rows)
    db.commit()
    return {tag.name: tag for tag in rows}


@pytest.fixture
def new_test_payload(tags):
    return {
        "title": "Python basics",
        "description": "Warm-up questions",
        "questions": [
            {"question_text": "2 + 2?", "options": ["3", "4", "5"], "correct_answer": 1, "points": 2},
            {"question_text": "Type of []?", "options": ["list", "dict"], "correct_answer": "list"},
            {"question_text": "len('abc')?", "options": ["2", "3"], "correct_answer": 1, "points": 3},
        ],
        "tags": [{"id": str(tags["python"].id)}],
        "created_by": "5a1c0b8e-8a4f-4a55-9d7e-0d5f0c7e2b11",
    }
