from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base

SUBSCRIPTION_SOURCE_PREFIX = "subscription:"


class AvailabilitySubscription(Base):
    """External calendar feed (ICS) whose events block out study time."""
    __tablename__ = "availability_subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String)
    feed_url = Column(String, nullable=False)
    last_synced_at = Column(DateTime)
    last_sync_status = Column(String)  # success, failed
    last_sync_message = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="availability_subscriptions")

    @property
    def block_source(self) -> str:
        return f"{SUBSCRIPTION_SOURCE_PREFIX}{self.id}"

    def __repr__(self):
        return f"<AvailabilitySubscription(id={self.id}, user_id={self.user_id})>"


class AvailabilityBlock(Base):
    """Busy interval, either imported from a subscription or entered manually."""
    __tablename__ = "availability_blocks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_at = Column(DateTime, nullable=False)
    end_at = Column(DateTime, nullable=False)
    source = Column(String, default="manual", index=True)  # manual, subscription:<id>

    def __repr__(self):
        return f"<AvailabilityBlock(id={self.id}, source='{self.source}')>"
