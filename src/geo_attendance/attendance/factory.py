from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceAction, FailureReason
from ..core.exceptions import ValidationError
from .strategies.base import MarkStrategy
from .strategies.checkin_strategy import CheckInStrategy
from .strategies.checkout_strategy import CheckOutStrategy


@dataclass
class MarkStrategyFactory:
    """Factory Pattern: choose the transition for the requested action."""

    def for_action(self, action: str) -> MarkStrategy:
        try:
            parsed = AttendanceAction(action)
        except ValueError:
            raise ValidationError(
                f"Unknown attendance type: {action!r}", reason=FailureReason.UNKNOWN_TYPE
            ) from None

        if parsed == AttendanceAction.CHECK_IN:
            return CheckInStrategy()
        return CheckOutStrategy()
