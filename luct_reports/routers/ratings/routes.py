from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db
from luct_reports.models import Rating
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.rating import RatingCreate, RatingOut
from luct_reports.services.catalog import rating_query, to_models
from luct_reports.services.rating_service import submit_rating
from luct_reports.utils import success
from luct_reports.visibility import RATING_SCOPES, scoped

router = APIRouter(prefix="/api/ratings", tags=["ratings"])


@router.get("")
def list_ratings(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    ratings = scoped(RATING_SCOPES, rating_query(session), claims)
    return success(ratings=to_models(RatingOut, ratings))


@router.post("")
def rate_lecturer(
    data: RatingCreate,
    response: Response,
    claims: TokenClaims = Depends(authenticate),
    session: Session = Depends(get_db),
):
    rating, created = submit_rating(session, claims, data)
    row = rating_query(session).filter(Rating.id == rating.id).one()
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return success(
        message="Rating submitted successfully" if created else "Rating updated successfully",
        rating=RatingOut.model_validate(dict(row._mapping)),
    )
