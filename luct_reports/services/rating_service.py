from datetime import datetime, timezone

from sqlalchemy.orm import Session

from luct_reports.errors import NotFound, ValidationFailed
from luct_reports.models import Rating, User
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.rating import RatingCreate
from luct_reports.services.transactions import atomic


def submit_rating(session: Session, claims: TokenClaims, data: RatingCreate) -> tuple[Rating, bool]:
    """Insert or overwrite the caller's rating of a lecturer. Returns (rating, created)."""
    lecturer = session.get(User, data.lecturer_id)
    if lecturer is None:
        raise NotFound("Lecturer not found")
    if not lecturer.is_lecturer:
        raise ValidationFailed("Only lecturers can be rated")
    if lecturer.id == claims.user_id:
        raise ValidationFailed("You cannot rate yourself")

    rating = (
        session.query(Rating)
        .filter(Rating.user_id == claims.user_id, Rating.lecturer_id == lecturer.id)
        .first()
    )
    created = rating is None
    with atomic(session, "Rating already submitted"):
        if created:
            rating = Rating(user_id=claims.user_id, lecturer_id=lecturer.id)
            session.add(rating)
        rating.rating = data.rating
        rating.comments = data.comments
        rating.created_at = datetime.now(timezone.utc)
    return rating, created
