from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models.user import User
from app.models.course import Course
from app.models.assignment import Assignment
from app.schemas.assignment import DashboardResponse
from app.services.assignments import serialize_assignment, compute_stats, sort_by_due_date
from app.utils.auth import get_current_user

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Assignments due soonest first, plus progress and urgency counts."""
    assignments = db.query(Assignment).join(Course).options(
        joinedload(Assignment.course)
    ).filter(Course.user_id == current_user.id).all()

    now = datetime.now().astimezone()
    items = [serialize_assignment(a, now=now) for a in sort_by_due_date(assignments)]

    return DashboardResponse(assignments=items, stats=compute_stats(items))
