from sqlalchemy import Column, Integer, String, DateTime, Text, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base

ASSIGNMENT_STATUSES = ("not_started", "in_progress", "done")


class Assignment(Base):
    """Coursework item with a due date and the student's own progress state."""
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    due_at = Column(DateTime)

    # Grading, as reported by the LMS
    points_possible = Column(Float)
    score = Column(Float)
    grade = Column(String)

    # Local state
    status = Column(String, default="not_started")  # not_started, in_progress, done
    priority = Column(Integer, default=0)  # 0 low, 1 medium, 2 high
    estimated_effort_minutes = Column(Integer)
    notes = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    course = relationship("Course", back_populates="assignments")
    attachments = relationship("Attachment", back_populates="assignment", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Assignment(id={self.id}, title='{self.title}', course_id={self.course_id})>"
