from datetime import timedelta
from types import SimpleNamespace

import pytest

from luct_reports.config import Settings
from luct_reports.dependencies import verify_token
from luct_reports.errors import Unauthorized
from luct_reports.models import Role
from luct_reports.security import decode_access_token, hash_password, issue_token, verify_and_update_password


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(_env_file=None, SECRET_KEY="unit-secret", DATABASE_URL="sqlite://")


def _user(**overrides):
    values = {"id": 7, "username": "mpho", "role": Role.LECTURER, "faculty_id": 2}
    values.update(overrides)
    return SimpleNamespace(**values)


def test_issued_token_carries_identity(settings):
    claims = verify_token(issue_token(_user(), settings), settings)
    assert claims.user_id == 7
    assert claims.username == "mpho"
    assert claims.role is Role.LECTURER
    assert claims.faculty_id == 2


def test_token_expires_after_eight_hours_by_default(settings):
    payload = decode_access_token(issue_token(_user(), settings), settings)
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 480
    assert "exp" in payload


def test_expired_token_is_rejected(settings):
    token = issue_token(_user(), settings, expires_delta=timedelta(seconds=-5))
    with pytest.raises(Unauthorized):
        verify_token(token, settings)


def test_token_signed_with_other_secret_is_rejected(settings):
    forged = issue_token(_user(), Settings(_env_file=None, SECRET_KEY="someone-else", DATABASE_URL="sqlite://"))
    with pytest.raises(Unauthorized):
        verify_token(forged, settings)


def test_garbage_token_is_rejected(settings):
    with pytest.raises(Unauthorized):
        verify_token("not.a.token", settings)


def test_token_with_unknown_role_is_rejected(settings):
    token = issue_token(_user(role=SimpleNamespace(value="Dean")), settings)
    with pytest.raises(Unauthorized):
        verify_token(token, settings)


def test_password_hashing_round_trip():
    hashed = hash_password("s3cret!")
    assert hashed != "s3cret!"
    verified, new_hash = verify_and_update_password("s3cret!", hashed)
    assert verified is True
    assert verify_and_update_password("wrong", hashed)[0] is False
