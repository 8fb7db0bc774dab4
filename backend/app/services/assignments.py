from datetime import datetime
from typing import Iterable, List, Optional

from app.models.assignment import Assignment
from app.schemas.assignment import AssignmentResponse, DashboardStats
from app.utils.completion import get_effective_status
from app.utils.urgency import get_urgency_info


def serialize_assignment(assignment: Assignment, now: Optional[datetime] = None) -> AssignmentResponse:
    """Build the client view of an assignment: effective status plus urgency."""
    effective_status = get_effective_status(
        local_status=assignment.status,
        score=assignment.score,
        grade=assignment.grade,
        points=assignment.points_possible,
    )
    return AssignmentResponse(
        id=assignment.id,
        course_id=assignment.course_id,
        course_name=assignment.course.name if assignment.course else None,
        title=assignment.title,
        description=assignment.description,
        due_at=assignment.due_at,
        points_possible=assignment.points_possible,
        score=assignment.score,
        grade=assignment.grade,
        status=effective_status,
        priority=assignment.priority or 0,
        estimated_effort_minutes=assignment.estimated_effort_minutes,
        notes=assignment.notes,
        urgency=get_urgency_info(assignment.due_at, effective_status, now=now),
    )


def compute_stats(assignments: Iterable[AssignmentResponse]) -> DashboardStats:
    items: List[AssignmentResponse] = list(assignments)
    return DashboardStats(
        total=len(items),
        completed=sum(1 for a in items if a.status == "done"),
        in_progress=sum(1 for a in items if a.status == "in_progress"),
        urgent=sum(1 for a in items if a.urgency and a.urgency.is_urgent and not a.urgency.is_overdue),
        overdue=sum(1 for a in items if a.urgency and a.urgency.is_overdue),
    )


def sort_by_due_date(assignments: Iterable[Assignment]) -> List[Assignment]:
    """Earliest due first; undated assignments last."""
    return sorted(
        assignments,
        key=lambda a: (a.due_at is None, a.due_at or datetime.max, a.id),
    )
