from datetime import datetime
from typing import List, Optional
from pydantic import Field
from app.schemas.base import CamelModel


class UrgencyInfo(CamelModel):
    days_until_due: int
    is_urgent: bool
    is_overdue: bool


class AssignmentResponse(CamelModel):
    id: int
    course_id: int
    course_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    due_at: Optional[datetime] = None
    points_possible: Optional[float] = None
    score: Optional[float] = None
    grade: Optional[str] = None
    status: str
    priority: int = 0
    estimated_effort_minutes: Optional[int] = None
    notes: Optional[str] = None
    urgency: Optional[UrgencyInfo] = None


class LocalStateUpdate(CamelModel):
    # Loosely typed on purpose: invalid values are ignored rather than rejected
    status: Optional[str] = None
    priority: Optional[int] = None
    estimated_effort_minutes: Optional[int] = None
    notes: Optional[str] = None


class DashboardStats(CamelModel):
    total: int
    completed: int
    in_progress: int
    urgent: int
    overdue: int


class DashboardResponse(CamelModel):
    assignments: List[AssignmentResponse]
    stats: DashboardStats


class CourseSummary(CamelModel):
    id: int
    name: str
    code: Optional[str] = None
    assignment_count: int = 0


class CourseDetail(CamelModel):
    id: int
    name: str
    code: Optional[str] = None
    assignments: List[AssignmentResponse] = Field(default_factory=list)
