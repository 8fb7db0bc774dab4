"""
Quick script to create a demo user with a class, a few assignments and a tutor thread
"""
import sys
from datetime import datetime, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.database import SessionLocal, engine, Base
from app.models import User, Course, Assignment, TutorThread, TutorMessage
from app.utils.auth import get_password_hash

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo1234"


def seed(db):
    # Check if demo user already exists
    demo_user = db.query(User).filter(User.email == DEMO_EMAIL).first()
    if demo_user:
        print("✓ Demo user already exists")
        return demo_user

    demo_user = User(
        email=DEMO_EMAIL,
        hashed_password=get_password_hash(DEMO_PASSWORD),
        name="Demo Student",
        timezone="America/Toronto"
    )
    db.add(demo_user)
    db.flush()

    course = Course(user_id=demo_user.id, name="Introduction to Programming", code="CS 1026")
    db.add(course)
    db.flush()

    today = datetime.now().replace(hour=23, minute=59, second=0, microsecond=0)
    db.add_all([
        Assignment(course_id=course.id, title="Lab 1: Variables", due_at=today - timedelta(days=1),
                   points_possible=10, score=9, grade="9"),
        Assignment(course_id=course.id, title="Assignment 1: Loops", due_at=today + timedelta(days=2),
                   points_possible=20, status="in_progress"),
        Assignment(course_id=course.id, title="Midterm Review", due_at=today + timedelta(days=14)),
        Assignment(course_id=course.id, title="Reading: Chapter 3"),
    ])

    thread = TutorThread(user_id=demo_user.id)
    db.add(thread)
    db.flush()
    db.add_all([
        TutorMessage(thread_id=thread.id, role="user", content="Can you explain for-loops?"),
        TutorMessage(thread_id=thread.id, role="assistant",
                     content="A for-loop repeats a block once for every item in a sequence."),
    ])

    db.commit()
    db.refresh(demo_user)

    print("✓ Demo user created successfully!")
    print(f"  Email: {DEMO_EMAIL}")
    print(f"  Password: {DEMO_PASSWORD}")
    return demo_user


if __name__ == "__main__":
    # Create database tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed(db)
    except Exception as e:
        print(f"✗ Error creating demo user: {e}")
        db.rollback()
        raise
    finally:
        db.close()
