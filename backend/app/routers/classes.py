from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.models.course import Course
from app.models.assignment import Assignment
from app.schemas.assignment import CourseSummary, CourseDetail
from app.services.assignments import serialize_assignment, sort_by_due_date
from app.utils.auth import get_current_user

router = APIRouter(prefix="/api/classes", tags=["Classes"])


@router.get("")
async def get_classes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all classes for the current user with their assignment counts."""
    rows = db.query(Course, func.count(Assignment.id)).outerjoin(
        Assignment, Assignment.course_id == Course.id
    ).filter(
        Course.user_id == current_user.id
    ).group_by(Course.id).order_by(Course.name).all()

    classes = [
        CourseSummary(id=course.id, name=course.name, code=course.code, assignment_count=count)
        for course, count in rows
    ]
    return {"classes": [c.model_dump(by_alias=True) for c in classes]}


@router.get("/{course_id}", response_model=CourseDetail)
async def get_class(
    course_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a class and its assignments."""
    course = db.query(Course).filter(
        Course.id == course_id,
        Course.user_id == current_user.id
    ).first()

    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Class not found"
        )

    return CourseDetail(
        id=course.id,
        name=course.name,
        code=course.code,
        assignments=[serialize_assignment(a) for a in sort_by_due_date(course.assignments)]
    )
