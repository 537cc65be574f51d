# tests/conftest.py
import pytest
from datetime import time
from types import SimpleNamespace
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.models.user import User, UserRole
from app.models.campus import Campus
from app.models.room import Room, Slot, Roomslot
import app.models  # noqa: F401

@pytest.fixture
def mock_db_session():
    """Fake DB session"""
    session = MagicMock(spec=Session)
    # Mock chaining query (db.query().filter()...)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.options.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    return session

@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)()
    yield session
    session.close()

@pytest.fixture
def world(db_session):
    """One campus, three rooms (the third disabled), three slots and three users."""
    campus = Campus(name="Main Campus", address="1 University Road")
    db_session.add(campus)
    db_session.flush()

    slots = [
        Slot(slot_number=1, start_time=time(7, 0), end_time=time(8, 30)),
        Slot(slot_number=2, start_time=time(8, 45), end_time=time(10, 15)),
        Slot(slot_number=3, start_time=time(10, 30), end_time=time(12, 0)),
    ]
    rooms = [
        Room(campus_id=campus.id, code="A101", room_type="classroom", capacity=30),
        Room(campus_id=campus.id, code="A102", room_type="classroom", capacity=40),
        Room(campus_id=campus.id, code="LAB1", room_type="computer_lab", capacity=20, is_available=False),
    ]
    db_session.add_all(slots + rooms)
    db_session.flush()
    for room in rooms:
        for slot in slots:
            db_session.add(Roomslot(room_id=room.id, slot_id=slot.id))

    student = User(email="student@example.com", password_hash="x", full_name="Sam Student", role=int(UserRole.STUDENT))
    other = User(email="other@example.com", password_hash="x", full_name="Olly Other", role=int(UserRole.LECTURER))
    manager = User(email="manager@example.com", password_hash="x", full_name="Mia Manager", role=int(UserRole.MANAGER))
    db_session.add_all([student, other, manager])
    db_session.commit()

    return SimpleNamespace(
        campus=campus,
        rooms=rooms,
        slots=slots,
        student=student,
        other=other,
        manager=manager,
    )
