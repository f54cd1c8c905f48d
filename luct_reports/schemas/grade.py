from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from luct_reports.models import MAX_GRADE, MIN_GRADE, GradeType


class GradeCreate(BaseModel):
    student_id: int
    class_id: int
    grade: float = Field(ge=MIN_GRADE, le=MAX_GRADE)
    grade_type: GradeType
    description: Optional[str] = None
    date_given: date = Field(default_factory=date.today)


class GradeOut(BaseModel):
    grade_id: int
    student_id: int
    student_name: Optional[str] = None
    class_id: int
    class_name: Optional[str] = None
    lecturer_id: int
    lecturer_name: Optional[str] = None
    grade: float
    grade_type: GradeType
    description: Optional[str] = None
    date_given: date
