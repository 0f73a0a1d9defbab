from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EvidenceKind


@dataclass(frozen=True)
class EvidenceOutcome:
    """Result of attaching photo evidence to an attendance event.

    - UPLOADED: `url` holds the hosted image URL.
    - FALLBACK_RAW: upload was not possible; `raw` holds the original payload.
    - SKIPPED: no photo was supplied.
    """

    kind: EvidenceKind
    url: Optional[str] = None
    raw: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def uploaded(cls, url: str) -> "EvidenceOutcome":
        return cls(kind=EvidenceKind.UPLOADED, url=url)

    @classmethod
    def fallback_raw(cls, raw: str, *, error: Optional[str] = None) -> "EvidenceOutcome":
        return cls(kind=EvidenceKind.FALLBACK_RAW, raw=raw, error=error)

    @classmethod
    def skipped(cls) -> "EvidenceOutcome":
        return cls(kind=EvidenceKind.SKIPPED)

    @property
    def reference(self) -> Optional[str]:
        """Value stored on the attendance record."""
        if self.kind == EvidenceKind.UPLOADED:
            return self.url
        if self.kind == EvidenceKind.FALLBACK_RAW:
            return self.raw
        return None
