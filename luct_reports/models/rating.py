from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base

MIN_RATING = 1
MAX_RATING = 5


class Rating(Base):
    """A user's score for a lecturer. One row per (rater, lecturer); resubmitting overwrites."""

    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True)
    lecturer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comments = Column(Text, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    lecturer = relationship("User", foreign_keys=[lecturer_id])
    rater = relationship("User", foreign_keys=[user_id])

    __table_args__ = (
        CheckConstraint(f"rating >= {MIN_RATING} AND rating <= {MAX_RATING}", name="check_rating_range"),
        CheckConstraint("user_id <> lecturer_id", name="check_rating_not_self"),
        UniqueConstraint("user_id", "lecturer_id", name="uq_rating_rater_lecturer"),
    )
