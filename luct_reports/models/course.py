from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    code = Column(String(50), unique=True, nullable=False)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=False)
    program_leader_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    faculty = relationship("Faculty", back_populates="courses")
    program_leader = relationship("User")
    classes = relationship("LectureClass", back_populates="course")

    def __repr__(self):
        return f"<Course id={self.id} {self.code}>"


class LectureClass(Base):
    """A scheduled class of a course, taught by one lecturer."""

    __tablename__ = "classes"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    lecturer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    venue = Column(String(255))
    scheduled_time = Column(DateTime, nullable=True)
    # denormalised count of Enrollment rows, kept in step inside the enrolment transaction
    total_registered_students = Column(Integer, nullable=False, default=0)

    course = relationship("Course", back_populates="classes")
    lecturer = relationship("User")
    enrollments = relationship("Enrollment", back_populates="lecture_class")

    def __repr__(self):
        return f"<LectureClass id={self.id} {self.name} lecturer_id={self.lecturer_id}>"
