"""Grade-driven completion: graded work counts as done unless it scored zero."""
from typing import Optional


def _parse_numeric_grade(grade: Optional[str]) -> Optional[float]:
    if not isinstance(grade, str):
        return None
    trimmed = grade.strip()
    if not trimmed:
        return None
    if trimmed.endswith("%"):
        trimmed = trimmed[:-1]
    try:
        return float(trimmed)
    except ValueError:
        return None


def is_graded(score: Optional[float] = None, grade: Optional[str] = None) -> bool:
    has_score = isinstance(score, (int, float))
    has_grade_text = isinstance(grade, str) and len(grade.strip()) > 0
    return has_score or has_grade_text


def is_zero_score_with_positive_points(
    score: Optional[float] = None,
    grade: Optional[str] = None,
    points: Optional[float] = None,
) -> bool:
    if points is None or points <= 0:
        return False
    if isinstance(score, (int, float)) and score == 0:
        return True
    return _parse_numeric_grade(grade) == 0


def should_auto_complete_from_grade(
    score: Optional[float] = None,
    grade: Optional[str] = None,
    points: Optional[float] = None,
) -> bool:
    if not is_graded(score, grade):
        return False
    return not is_zero_score_with_positive_points(score, grade, points)


def get_effective_status(
    local_status: Optional[str] = None,
    score: Optional[float] = None,
    grade: Optional[str] = None,
    points: Optional[float] = None,
) -> str:
    if should_auto_complete_from_grade(score, grade, points):
        return "done"
    return local_status or "not_started"
