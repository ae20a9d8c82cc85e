from __future__ import annotations

from typing import Optional

import pytest
from werkzeug.security import check_password_hash

from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import NotFoundError, ValidationError
from src.hr_portal.hr_portal.users.model import User
from src.hr_portal.hr_portal.users.service import UserService


class InMemoryUsers:
    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def list_all(self):
        return list(self._users.values())

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        uid = self._next_id
        self._next_id += 1
        self._users[uid] = User(id=uid, username=username, password_hash=password_hash, role=role)
        return uid

    def update_user(self, user_id: int, *, username: str, role: Role) -> bool:
        old = self._users[user_id]
        self._users[user_id] = User(id=user_id, username=username, password_hash=old.password_hash, role=role)
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None

    def count_by_role(self, role: Role) -> int:
        return sum(1 for u in self._users.values() if u.role == role)


def test_create_user_hashes_password():
    repo = InMemoryUsers()
    svc = UserService(repo)

    uid = svc.create_user(username=" noa ", password="secret1", role="user")

    user = repo.get_by_id(uid)
    assert user.username == "noa"
    assert user.role == Role.USER
    assert check_password_hash(user.password_hash, "secret1")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"username": "", "password": "secret1", "role": "user"},
        {"username": "noa", "password": "123", "role": "user"},
        {"username": "noa", "password": "secret1", "role": "owner"},
    ],
)
def test_create_user_validates_input(kwargs):
    with pytest.raises(ValidationError):
        UserService(InMemoryUsers()).create_user(**kwargs)


def test_duplicate_username_is_rejected():
    svc = UserService(InMemoryUsers())
    svc.create_user(username="noa", password="secret1", role="user")

    with pytest.raises(ValidationError, match="already exists"):
        svc.create_user(username="noa", password="secret2", role="admin")


def test_last_admin_cannot_be_deleted_or_demoted():
    repo = InMemoryUsers()
    svc = UserService(repo)
    admin_id = svc.create_user(username="root", password="secret1", role="admin")

    with pytest.raises(ValidationError, match="last admin"):
        svc.delete_user(admin_id)
    with pytest.raises(ValidationError, match="last admin"):
        svc.update_user(admin_id, username="root", role="user")

    second = svc.create_user(username="dana", password="secret1", role="admin")
    svc.update_user(admin_id, username="root", role="user")
    assert repo.get_by_id(admin_id).role == Role.USER
    with pytest.raises(ValidationError):
        svc.delete_user(second)


def test_update_and_delete_unknown_user():
    svc = UserService(InMemoryUsers())

    with pytest.raises(NotFoundError):
        svc.update_user(9, username="x", role="user")
    with pytest.raises(NotFoundError):
        svc.delete_user(9)


def test_rename_to_taken_username_is_rejected():
    svc = UserService(InMemoryUsers())
    svc.create_user(username="root", password="secret1", role="admin")
    uid = svc.create_user(username="noa", password="secret1", role="user")

    with pytest.raises(ValidationError, match="already exists"):
        svc.update_user(uid, username="root", role="user")
