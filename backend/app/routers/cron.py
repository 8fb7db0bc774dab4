import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cron", tags=["Cron"])


def verify_cron_secret(authorization: Optional[str] = Header(None)) -> None:
    """Check the scheduler's bearer token against CRON_SECRET.

    Without a configured secret the endpoint is open in development and
    refuses to run in production.
    """
    cron_secret = settings.CRON_SECRET
    if not cron_secret:
        if settings.is_production:
            logger.error("CRON_SECRET is not configured; refusing cron request")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="CRON_SECRET is not configured"
            )
        return

    expected = f"Bearer {cron_secret}"
    if not authorization or not secrets.compare_digest(authorization.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )


@router.get("/reminders", dependencies=[Depends(verify_cron_secret)])
async def send_reminders():
    """Reminder dispatch entry point for the scheduler.

    Email notifications are disabled, so nothing is sent.
    """
    logger.info("Cron reminders triggered; email reminders are disabled")
    return {
        "ok": True,
        "sent": 0,
        "skipped": 0,
        "message": "Email reminders are disabled."
    }
