from .user import User
from .course import Course
from .assignment import Assignment
from .attachment import Attachment
from .availability import AvailabilitySubscription, AvailabilityBlock
from .tutor import TutorThread, TutorMessage

__all__ = [
    "User", "Course", "Assignment", "Attachment",
    "AvailabilitySubscription", "AvailabilityBlock",
    "TutorThread", "TutorMessage",
]
