import logging
from typing import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .config import Settings
from .errors import Forbidden, Unauthorized
from .extensions import Database
from .models import Role
from .schemas.auth import TokenClaims
from .security import decode_access_token

log = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """Dependency to provide a database session for one request."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return ""
    return token.strip()


def verify_token(token: str, settings: Settings) -> TokenClaims:
    """Claims of a token, or Unauthorized when it is malformed, forged or expired."""
    payload = decode_access_token(token, settings)
    if payload is None:
        raise Unauthorized("Invalid token")
    try:
        return TokenClaims.model_validate(payload)
    except ValueError:
        raise Unauthorized("Invalid token")


def authenticate(request: Request, settings: Settings = Depends(get_settings)) -> TokenClaims:
    """Dependency that requires a valid bearer token and returns its claims."""
    token = _bearer_token(request)
    if token is None:
        raise Unauthorized("Missing token")
    if not token:
        raise Unauthorized("Invalid token")
    return verify_token(token, settings)


def require_role(*roles: Role):
    """Dependency factory that ensures the caller has one of the required roles."""
    allowed = frozenset(roles)

    def role_checker(claims: TokenClaims = Depends(authenticate)) -> TokenClaims:
        if claims.role not in allowed:
            log.info("Denied %s (%s): needs one of %s", claims.username, claims.role.value, sorted(r.value for r in allowed))
            raise Forbidden("Access denied")
        return claims

    return role_checker
