import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.models.availability import AvailabilitySubscription, AvailabilityBlock
from app.schemas.availability import (
    SubscriptionResponse, SubscriptionListResponse, SubscriptionCreateResponse
)
from app.utils.auth import get_current_user
from app.utils.feed_url import InvalidFeedUrl, normalize_calendar_feed_url, mask_calendar_feed_url
from app.utils.safe_json import safe_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/availability", tags=["Availability"])

MAX_NAME_LENGTH = 80
# Largest id SQLite can store (signed 64-bit)
MAX_RECORD_ID = 2 ** 63 - 1


def parse_record_id(raw: str) -> Optional[int]:
    """Numeric id from a path segment, or None for anything that cannot be one."""
    if not raw.isascii() or not raw.isdigit():
        return None
    record_id = int(raw)
    return record_id if record_id <= MAX_RECORD_ID else None


def serialize_subscription(subscription: AvailabilitySubscription) -> SubscriptionResponse:
    return SubscriptionResponse(
        id=subscription.id,
        name=subscription.name,
        feed_url_masked=mask_calendar_feed_url(subscription.feed_url),
        last_synced_at=subscription.last_synced_at,
        last_sync_status=subscription.last_sync_status,
        last_sync_message=subscription.last_sync_message,
        created_at=subscription.created_at,
        updated_at=subscription.updated_at,
    )


@router.get("/subscriptions", response_model=SubscriptionListResponse)
async def list_subscriptions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all calendar subscriptions for the current user."""
    subscriptions = db.query(AvailabilitySubscription).filter(
        AvailabilitySubscription.user_id == current_user.id
    ).order_by(AvailabilitySubscription.created_at.desc(), AvailabilitySubscription.id.desc()).all()

    return SubscriptionListResponse(
        subscriptions=[serialize_subscription(s) for s in subscriptions]
    )


@router.post(
    "/subscriptions",
    response_model=SubscriptionCreateResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_subscription(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Subscribe to an ICS calendar feed."""
    body = safe_json(await request.body())
    if not isinstance(body, dict):
        body = {}

    feed_url = body.get("feedUrl") if isinstance(body.get("feedUrl"), str) else ""
    name = body.get("name") if isinstance(body.get("name"), str) else None

    if not feed_url.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Calendar feed URL is required."
        )

    if name and len(name.strip()) > MAX_NAME_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Calendar name must be {MAX_NAME_LENGTH} characters or fewer."
        )

    try:
        normalized_url = normalize_calendar_feed_url(feed_url)
    except InvalidFeedUrl as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    subscription = AvailabilitySubscription(
        user_id=current_user.id,
        name=name.strip() if name and name.strip() else None,
        feed_url=normalized_url
    )
    db.add(subscription)
    db.commit()
    db.refresh(subscription)

    logger.info("User %s subscribed to calendar feed %s", current_user.id, subscription.id)
    return SubscriptionCreateResponse(subscription=serialize_subscription(subscription))


@router.delete("/subscriptions/{subscription_id}")
async def delete_subscription(
    subscription_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a subscription together with the blocks it imported."""
    subscription = None
    record_id = parse_record_id(subscription_id)
    if record_id is not None:
        subscription = db.query(AvailabilitySubscription).filter(
            AvailabilitySubscription.id == record_id,
            AvailabilitySubscription.user_id == current_user.id
        ).first()

    if not subscription:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Subscription not found."
        )

    db.query(AvailabilityBlock).filter(
        AvailabilityBlock.user_id == current_user.id,
        AvailabilityBlock.source == subscription.block_source
    ).delete(synchronize_session=False)
    db.delete(subscription)
    db.commit()

    logger.info("User %s deleted calendar feed %s", current_user.id, subscription_id)
    return {"success": True}
