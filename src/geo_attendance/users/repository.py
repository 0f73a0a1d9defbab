from __future__ import annotations

from typing import Optional, Protocol

from .model import Subject


class SubjectRepository(Protocol):
    """Opaque identity lookup used by the attendance core."""

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def delete_by_id(self, subject_id: int) -> bool:
        raise NotImplementedError
