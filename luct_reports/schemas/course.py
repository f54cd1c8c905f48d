from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FacultyCreate(BaseModel):
    faculty_name: str = Field(min_length=1, max_length=255)


class FacultyOut(BaseModel):
    faculty_id: int
    faculty_name: str


class CourseCreate(BaseModel):
    course_name: str = Field(min_length=1, max_length=255)
    course_code: str = Field(min_length=1, max_length=50)
    faculty_id: int


class CourseOut(BaseModel):
    course_id: int
    course_name: str
    course_code: str
    faculty_id: int
    faculty_name: Optional[str] = None
    program_leader_id: Optional[int] = None


class ClassCreate(BaseModel):
    class_name: str = Field(min_length=1, max_length=255)
    course_id: int
    lecturer_id: int
    venue: Optional[str] = None
    scheduled_time: Optional[datetime] = None


class ClassOut(BaseModel):
    class_id: int
    class_name: str
    course_id: int
    course_name: Optional[str] = None
    lecturer_id: int
    lecturer_name: Optional[str] = None
    venue: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    total_registered_students: int = 0


class EnrollmentCreate(BaseModel):
    class_id: int


class EnrollmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    enrollment_id: int
    student_id: int
    class_id: int
    class_name: Optional[str] = None
    enrollment_date: Optional[datetime] = None


class StudentOut(BaseModel):
    user_id: int
    username: str
    full_name: str
    email: str
    enrollment_date: Optional[datetime] = None
