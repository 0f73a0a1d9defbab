from __future__ import annotations

import hmac
from typing import Optional

from .base import VerificationStrategy


class ExactTokenStrategy(VerificationStrategy):
    """Token must match the configured office QR token."""

    def __init__(self, expected: str):
        if not expected:
            raise ValueError("ExactTokenStrategy requires a non-empty expected token")
        self._expected = expected

    def verify(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return hmac.compare_digest(token.strip().encode("utf-8"), self._expected.encode("utf-8"))
