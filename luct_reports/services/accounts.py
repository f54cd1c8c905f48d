import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from luct_reports.errors import Conflict, NotFound, Unauthorized, ValidationFailed
from luct_reports.models import Faculty, User
from luct_reports.schemas.auth import RegisterRequest
from luct_reports.security import verify_and_update_password
from luct_reports.services.transactions import atomic

log = logging.getLogger(__name__)

DUPLICATE_ACCOUNT = "Username or email already exists"


def register_user(session: Session, data: RegisterRequest) -> User:
    if data.faculty_id is not None and session.get(Faculty, data.faculty_id) is None:
        raise ValidationFailed("Faculty not found")

    existing = (
        session.query(User.id)
        .filter(or_(User.username == data.username, User.email == data.email))
        .first()
    )
    if existing:
        raise Conflict(DUPLICATE_ACCOUNT)

    user = User(
        username=data.username,
        full_name=data.full_name,
        email=data.email,
        role=data.role,
        faculty_id=data.faculty_id,
    )
    user.set_password(data.password)
    with atomic(session, DUPLICATE_ACCOUNT):
        session.add(user)
    log.info("Registered %s as %s", user.username, user.role.value)
    return user


def authenticate_user(session: Session, username: str, password: str) -> User:
    user = session.query(User).filter(User.username == username.strip()).first()
    if not user:
        raise Unauthorized("Invalid credentials")

    verified, new_hash = verify_and_update_password(password, user.password_hash)
    if not verified:
        log.info("Failed login for %s", username)
        raise Unauthorized("Invalid credentials")
    if new_hash:
        user.password_hash = new_hash
        session.commit()
    return user


def get_user_or_404(session: Session, user_id: int) -> User:
    user = session.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user
