from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class VerificationStrategy(ABC):
    """Strategy Pattern: decide whether a verification token proves presence."""

    @abstractmethod
    def verify(self, token: Optional[str]) -> bool:
        raise NotImplementedError
