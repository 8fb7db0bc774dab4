import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models.user import User
from app.models.course import Course
from app.models.assignment import Assignment, ASSIGNMENT_STATUSES
from app.schemas.assignment import AssignmentResponse, LocalStateUpdate
from app.services.assignments import serialize_assignment, sort_by_due_date
from app.utils.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assignments", tags=["Assignments"])


def get_owned_assignment(db: Session, assignment_id: int, user_id: int) -> Assignment:
    assignment = db.query(Assignment).join(Course).options(
        joinedload(Assignment.course)
    ).filter(
        Assignment.id == assignment_id,
        Course.user_id == user_id
    ).first()

    if not assignment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found"
        )
    return assignment


@router.get("", response_model=List[AssignmentResponse])
async def get_assignments(
    course_id: Optional[int] = Query(None, alias="courseId"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all assignments for the current user, earliest due first."""
    query = db.query(Assignment).join(Course).options(
        joinedload(Assignment.course)
    ).filter(Course.user_id == current_user.id)

    if course_id is not None:
        query = query.filter(Assignment.course_id == course_id)

    return [serialize_assignment(a) for a in sort_by_due_date(query.all())]


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a specific assignment."""
    assignment = get_owned_assignment(db, assignment_id, current_user.id)
    return serialize_assignment(assignment)


@router.patch("/{assignment_id}/local-state")
async def update_local_state(
    assignment_id: int,
    state: LocalStateUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the student's own progress fields; invalid values are ignored."""
    assignment = get_owned_assignment(db, assignment_id, current_user.id)

    update_data = {}
    if state.status in ASSIGNMENT_STATUSES:
        update_data["status"] = state.status
    if state.priority is not None and 0 <= state.priority <= 2:
        update_data["priority"] = state.priority
    if state.estimated_effort_minutes is not None and state.estimated_effort_minutes >= 0:
        update_data["estimated_effort_minutes"] = state.estimated_effort_minutes
    if state.notes is not None:
        update_data["notes"] = state.notes

    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid fields to update"
        )

    for field, value in update_data.items():
        setattr(assignment, field, value)

    db.commit()

    logger.info("Updated local state of assignment %s: %s", assignment_id, sorted(update_data))
    response = LocalStateUpdate(**update_data).model_dump(by_alias=True, exclude_none=True)
    return {"success": True, **response}
