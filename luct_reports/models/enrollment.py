from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base


class Enrollment(Base):
    __tablename__ = "student_enrollments"

    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    enrollment_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    student = relationship("User")
    lecture_class = relationship("LectureClass", back_populates="enrollments")

    __table_args__ = (
        UniqueConstraint("student_id", "class_id", name="unique_enrollment"),
    )

    def __repr__(self):
        return f"<Enrollment student_id={self.student_id} class_id={self.class_id}>"
