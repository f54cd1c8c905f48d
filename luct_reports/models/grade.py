import enum

from sqlalchemy import CheckConstraint, Column, Date, Enum, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base

MIN_GRADE = 0
MAX_GRADE = 100


class GradeType(str, enum.Enum):
    ASSIGNMENT = "assignment"
    EXAM = "exam"
    QUIZ = "quiz"
    PROJECT = "project"
    PARTICIPATION = "participation"
    HOMEWORK = "homework"


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    lecturer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    grade = Column(Numeric(5, 2, asdecimal=False), nullable=False)
    grade_type = Column(
        Enum(GradeType, name="grade_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    description = Column(Text)
    date_given = Column(Date, nullable=False)

    student = relationship("User", foreign_keys=[student_id])
    lecturer = relationship("User", foreign_keys=[lecturer_id])
    lecture_class = relationship("LectureClass")

    __table_args__ = (
        CheckConstraint(f"grade >= {MIN_GRADE} AND grade <= {MAX_GRADE}", name="check_grade_range"),
    )
