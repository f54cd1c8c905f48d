from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.config import Settings
from luct_reports.dependencies import authenticate, get_db, get_settings
from luct_reports.schemas.auth import LoginRequest, RegisterRequest, TokenClaims, UserOut
from luct_reports.security import issue_token
from luct_reports.services.accounts import authenticate_user, get_user_or_404, register_user
from luct_reports.utils import success

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    session: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Creates an account and logs it straight in."""
    user = register_user(session, data)
    return success(
        message="User registered successfully",
        token=issue_token(user, settings),
        user=UserOut.model_validate(user),
    )


@router.post("/login")
def login(
    data: LoginRequest,
    session: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(session, data.username, data.password)
    return success(token=issue_token(user, settings), user=UserOut.model_validate(user))


@router.get("/profile")
def profile(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    user = get_user_or_404(session, claims.user_id)
    return success(user=UserOut.model_validate(user))
