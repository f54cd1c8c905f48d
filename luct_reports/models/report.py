from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base


class Report(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    lecturer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_of_reporting = Column(String(50))
    date_of_lecture = Column(Date)
    topic_taught = Column(Text, default="")
    learning_outcomes = Column(Text, default="")
    recommendations = Column(Text, default="")
    actual_students_present = Column(Integer, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    lecture_class = relationship("LectureClass")
    lecturer = relationship("User")
    feedback = relationship("Feedback", back_populates="report", uselist=False)

    def __repr__(self):
        return f"<Report id={self.id} class_id={self.class_id} week={self.week_of_reporting}>"


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True)
    report_id = Column(Integer, ForeignKey("reports.id"), nullable=False)
    reviewer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    comments = Column(Text, nullable=False)

    report = relationship("Report", back_populates="feedback")
    reviewer = relationship("User")

    __table_args__ = (
        UniqueConstraint("report_id", name="uq_feedback_report"),
    )
