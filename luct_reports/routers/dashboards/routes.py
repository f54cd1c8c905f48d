from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db
from luct_reports.schemas.auth import TokenClaims
from luct_reports.services.dashboards import monitoring_metrics, overview_counts
from luct_reports.utils import success

router = APIRouter(prefix="/api", tags=["dashboards"])


@router.get("/analytics/dashboard")
def analytics_dashboard(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    return success(**overview_counts(session))


@router.get("/monitoring/dashboard")
def monitoring_dashboard(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    return success(role=claims.role, metrics=monitoring_metrics(session, claims))
