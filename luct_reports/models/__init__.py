# Re-export models so callers can keep using: from luct_reports.models import User, Report, ...
from .user import Faculty, User, Role
from .course import Course, LectureClass
from .enrollment import Enrollment
from .report import Report, Feedback
from .rating import Rating, MIN_RATING, MAX_RATING
from .grade import Grade, GradeType, MIN_GRADE, MAX_GRADE

__all__ = [
    # people
    "Faculty", "User", "Role",
    # teaching
    "Course", "LectureClass", "Enrollment",
    # reporting
    "Report", "Feedback",
    # assessment
    "Rating", "Grade", "GradeType",
    # limits
    "MIN_RATING", "MAX_RATING", "MIN_GRADE", "MAX_GRADE",
]
