from __future__ import annotations

import math
from typing import Any, Optional

from ..core.enums import FailureReason
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required", reason=FailureReason.INVALID_REQUEST)
    return value.strip()


def require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer", reason=FailureReason.INVALID_REQUEST)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(f"{field_name} must be an integer", reason=FailureReason.INVALID_REQUEST)


def optional_float(value: Any, field_name: str, *, limit: Optional[float] = None) -> Optional[float]:
    """Accept numbers or numeric strings; None and '' mean "not supplied".

    NaN and infinities are rejected; `limit` bounds the absolute value.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number", reason=FailureReason.INVALID_REQUEST)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number", reason=FailureReason.INVALID_REQUEST) from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number", reason=FailureReason.INVALID_REQUEST)
    if limit is not None and abs(number) > limit:
        raise ValidationError(
            f"{field_name} must be between -{limit:g} and {limit:g}", reason=FailureReason.INVALID_REQUEST
        )
    return number


def optional_str(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string", reason=FailureReason.INVALID_REQUEST)
    return value
