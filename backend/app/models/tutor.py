from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base


class TutorThread(Base):
    __tablename__ = "tutor_threads"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="tutor_threads")
    messages = relationship(
        "TutorMessage",
        back_populates="thread",
        cascade="all, delete-orphan",
        order_by="TutorMessage.id",
    )

    def __repr__(self):
        return f"<TutorThread(id={self.id}, user_id={self.user_id})>"


class TutorMessage(Base):
    __tablename__ = "tutor_messages"

    id = Column(Integer, primary_key=True, index=True)
    thread_id = Column(Integer, ForeignKey("tutor_threads.id"), nullable=False, index=True)
    role = Column(String, nullable=False)  # user, assistant
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    thread = relationship("TutorThread", back_populates="messages")

    def __repr__(self):
        return f"<TutorMessage(id={self.id}, thread_id={self.thread_id}, role='{self.role}')>"
