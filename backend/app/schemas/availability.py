from datetime import datetime
from typing import List, Optional
from app.schemas.base import CamelModel


class SubscriptionResponse(CamelModel):
    id: int
    name: Optional[str] = None
    feed_url_masked: str
    last_synced_at: Optional[datetime] = None
    last_sync_status: Optional[str] = None
    last_sync_message: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SubscriptionListResponse(CamelModel):
    subscriptions: List[SubscriptionResponse]


class SubscriptionCreateResponse(CamelModel):
    subscription: SubscriptionResponse
