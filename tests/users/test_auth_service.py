from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import pytest
from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import AuthenticationError
from src.hr_portal.hr_portal.users.model import User
from src.hr_portal.hr_portal.users.service import INVALID_CREDENTIALS, JWT_ALGORITHM, AuthService
from src.hr_portal.hr_portal.users.tokens import TokenRevocationList

SECRET = "test-secret"


@dataclass
class InMemoryUsers:
    users_by_name: dict[str, User] = field(default_factory=dict)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users_by_name.get(username)


def _users() -> InMemoryUsers:
    return InMemoryUsers(
        {
            "dana": User(id=1, username="dana", password_hash=generate_password_hash("secret1"), role=Role.ADMIN),
            "legacy": User(id=2, username="legacy", password_hash="not-a-hash", role=Role.USER),
        }
    )


def test_login_then_verify_returns_claims():
    auth = AuthService(_users(), secret_key=SECRET)

    result = auth.login("dana", "secret1")
    claims = auth.verify(result.token)

    assert result.to_dict()["user"] == {"id": 1, "username": "dana", "role": "admin"}
    assert claims["id"] == 1
    assert claims["username"] == "dana"
    assert claims["role"] == "admin"
    assert claims["jti"]


@pytest.mark.parametrize(
    "username, password",
    [("dana", "wrong"), ("nobody", "secret1"), ("legacy", "anything"), ("", "")],
)
def test_bad_credentials_share_one_message(username, password):
    auth = AuthService(_users(), secret_key=SECRET)

    with pytest.raises(AuthenticationError) as exc:
        auth.login(username, password)
    assert str(exc.value) == INVALID_CREDENTIALS


def test_expired_token_fails_verification():
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    issuer = AuthService(_users(), secret_key=SECRET, token_ttl=timedelta(hours=1), clock=lambda: two_hours_ago)
    token = issuer.login("dana", "secret1").token

    assert AuthService(_users(), secret_key=SECRET).verify(token) is None


def test_token_signed_with_other_key_fails_verification():
    token = AuthService(_users(), secret_key="other").login("dana", "secret1").token

    assert AuthService(_users(), secret_key=SECRET).verify(token) is None


def test_token_without_jti_is_rejected():
    token = jwt.encode(
        {"id": 1, "username": "dana", "role": "admin", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        SECRET,
        algorithm=JWT_ALGORITHM,
    )

    assert AuthService(_users(), secret_key=SECRET).verify(token) is None


@pytest.mark.parametrize("token", ["", None, "garbage", 42])
def test_verify_never_raises(token):
    assert AuthService(_users(), secret_key=SECRET).verify(token) is None


def test_logout_revokes_only_that_token():
    auth = AuthService(_users(), secret_key=SECRET)
    first = auth.login("dana", "secret1").token
    second = auth.login("dana", "secret1").token

    auth.logout(first)

    assert auth.verify(first) is None
    assert auth.verify(second) is not None


def test_logout_of_invalid_token_is_a_no_op():
    auth = AuthService(_users(), secret_key=SECRET)

    auth.logout("garbage")


def test_revocation_entries_expire_with_their_token():
    now = [datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)]
    revoked = TokenRevocationList(clock=lambda: now[0])

    revoked.revoke("abc", now[0] + timedelta(minutes=30))
    assert revoked.is_revoked("abc")
    assert len(revoked) == 1

    now[0] += timedelta(minutes=31)
    assert not revoked.is_revoked("abc")
    assert len(revoked) == 0


def test_expiry_follows_the_injected_clock():
    now = [datetime(2001, 1, 1, 9, 0, tzinfo=timezone.utc)]
    auth = AuthService(_users(), secret_key=SECRET, token_ttl=timedelta(minutes=10), clock=lambda: now[0])
    token = auth.login("dana", "secret1").token

    assert auth.verify(token) is not None

    now[0] += timedelta(minutes=11)
    assert auth.verify(token) is None
