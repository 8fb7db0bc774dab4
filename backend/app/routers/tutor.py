from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.models.user import User
from app.models.tutor import TutorThread, TutorMessage
from app.schemas.tutor import TutorThreadResponse, TutorMessageResponse
from app.utils.auth import get_current_user

router = APIRouter(prefix="/api/tutor", tags=["Tutor"])


@router.get("/thread", response_model=TutorThreadResponse)
async def get_thread(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Most recently active tutor thread for the current user, with its messages."""
    # Adding a message never touches the thread row, so activity is the newest message
    last_message_at = select(func.max(TutorMessage.created_at)).where(
        TutorMessage.thread_id == TutorThread.id
    ).correlate(TutorThread).scalar_subquery()
    last_activity = func.coalesce(last_message_at, TutorThread.updated_at)

    thread = db.query(TutorThread).options(
        selectinload(TutorThread.messages)
    ).filter(
        TutorThread.user_id == current_user.id
    ).order_by(last_activity.desc(), TutorThread.id.desc()).first()

    if not thread:
        return TutorThreadResponse(thread_id=None, messages=[])

    return TutorThreadResponse(
        thread_id=thread.id,
        messages=[TutorMessageResponse.model_validate(m) for m in thread.messages]
    )
