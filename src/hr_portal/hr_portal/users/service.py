from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional, Sequence

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import utc_now
from ..common.validators import parse_enum, require_min_length, require_non_empty, require_positive_int
from ..core.constants import DEFAULT_TOKEN_TTL_MINUTES, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository
from .tokens import TokenRevocationList

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
# Same message for unknown user and wrong password.
INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str

    def to_dict(self) -> dict:
        return {"user": self.user.to_public(), "token": self.token}


class AuthService:
    """Use case: login, token verification and logout."""

    def __init__(
        self,
        users: UserRepository,
        *,
        secret_key: str,
        token_ttl: timedelta = timedelta(minutes=DEFAULT_TOKEN_TTL_MINUTES),
        revocations: Optional[TokenRevocationList] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._users = users
        self._secret_key = secret_key
        self._token_ttl = token_ttl
        self._clock = clock
        self._revocations = revocations or TokenRevocationList(clock=clock)

    def login(self, username: str, password: str) -> LoginResult:
        logger.info("Login attempt for user %r", username)
        user = self._users.get_by_username((username or "").strip())
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        return LoginResult(user=user, token=self._issue_token(user))

    def _issue_token(self, user: User) -> str:
        issued_at = self._clock()
        claims = {
            "id": user.id,
            "username": user.username,
            "role": user.role.value,
            "jti": uuid.uuid4().hex,
            "iat": issued_at,
            "exp": issued_at + self._token_ttl,
        }
        return jwt.encode(claims, self._secret_key, algorithm=JWT_ALGORITHM)

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        if not token or not isinstance(token, str):
            return None
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "jti"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.PyJWTError:
            return None
        # Expiry is judged by the same clock that issued the token.
        exp = claims["exp"]
        if not isinstance(exp, (int, float)) or exp <= self._clock().timestamp():
            return None
        return claims

    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        """Claims of a valid, unexpired, unrevoked token; None otherwise. Never raises."""

        claims = self._decode(token)
        if claims is None or self._revocations.is_revoked(claims["jti"]):
            return None
        return claims

    def logout(self, token: str) -> None:
        claims = self._decode(token)
        if claims is None:
            return
        self._revocations.revoke(claims["jti"], claims["exp"])
        logger.info("User %r logged out", claims.get("username"))


class UserService:
    """Use case: manage accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def create_user(self, *, username: str, password: str, role) -> int:
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        role = parse_enum(Role, role or Role.USER.value, "Role")

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user_id = self._users.create_user(username=username, password_hash=generate_password_hash(password), role=role)
        logger.info("User %r created with role %s", username, role.value)
        return user_id

    def _require_user(self, user_id) -> User:
        user = self._users.get_by_id(require_positive_int(user_id, "User id"))
        if not user:
            raise NotFoundError("User not found")
        return user

    def _is_last_admin(self, user: User) -> bool:
        return user.role == Role.ADMIN and self._users.count_by_role(Role.ADMIN) <= 1

    def update_user(self, user_id, *, username: str, role) -> User:
        user = self._require_user(user_id)
        username = require_non_empty(username, "Username")
        role = parse_enum(Role, role, "Role")

        other = self._users.get_by_username(username)
        if other and other.id != user.id:
            raise ValidationError("Username already exists")
        if role != Role.ADMIN and self._is_last_admin(user):
            raise ValidationError("Cannot demote the last admin account")

        self._users.update_user(user.id, username=username, role=role)
        return self._users.get_by_id(user.id)

    def delete_user(self, user_id) -> None:
        user = self._require_user(user_id)
        if self._is_last_admin(user):
            raise ValidationError("Cannot delete the last admin account")
        if not self._users.delete_by_id(user.id):
            raise ValidationError("Failed to delete user")
        logger.info("User %r deleted", user.username)
