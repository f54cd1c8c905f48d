from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class ReportCreate(BaseModel):
    class_id: int
    week_of_reporting: Optional[str] = Field(default=None, max_length=50)
    date_of_lecture: Optional[date] = None
    topic_taught: str = ""
    learning_outcomes: str = ""
    recommendations: str = ""
    actual_students_present: int = Field(default=0, ge=0)


class FeedbackCreate(BaseModel):
    feedback: str = Field(min_length=1)


class ReportOut(BaseModel):
    report_id: int
    class_id: int
    lecturer_id: int
    week_of_reporting: Optional[str] = None
    date_of_lecture: Optional[date] = None
    topic_taught: Optional[str] = None
    learning_outcomes: Optional[str] = None
    recommendations: Optional[str] = None
    actual_students_present: Optional[int] = None
    created_at: Optional[datetime] = None
    class_name: Optional[str] = None
    course_name: Optional[str] = None
    course_code: Optional[str] = None
    lecturer_name: Optional[str] = None
    feedback_id: Optional[int] = None
    feedback_comments: Optional[str] = None
