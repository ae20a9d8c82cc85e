from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account. Plain data, no DB access."""

    id: int
    username: str
    password_hash: str
    role: Role

    def to_public(self) -> dict:
        return {"id": self.id, "username": self.username, "role": self.role.value}
