from __future__ import annotations

from typing import Optional

from .base import VerificationStrategy


class NonEmptyTokenStrategy(VerificationStrategy):
    """Any non-empty token is accepted, whitespace included (content is not checked)."""

    def verify(self, token: Optional[str]) -> bool:
        return bool(token)
