from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .strategies.base import VerificationStrategy
from .strategies.exact_strategy import ExactTokenStrategy
from .strategies.non_empty_strategy import NonEmptyTokenStrategy

NON_EMPTY = "non_empty"
EXACT = "exact"


@dataclass
class VerificationStrategyFactory:
    """Factory Pattern: choose the verification strategy from settings."""

    def for_mode(self, mode: Optional[str], *, qr_token: Optional[str] = None) -> VerificationStrategy:
        mode = (mode or NON_EMPTY).strip().lower()
        if mode == NON_EMPTY:
            return NonEmptyTokenStrategy()
        if mode == EXACT:
            return ExactTokenStrategy(qr_token or "")
        raise ValueError(f"Unknown verification mode: {mode!r}")
