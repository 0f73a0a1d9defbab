from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Subject:
    """Domain entity: a person whose attendance is recorded.

    Credentials live elsewhere; the attendance core only needs the id and role.
    """

    subject_id: int
    username: str
    full_name: str
    role: Role = Role.STUDENT

    def to_dict(self) -> dict:
        return {
            "userId": self.subject_id,
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role.value,
        }
