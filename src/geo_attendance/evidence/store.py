from __future__ import annotations

import logging
import re
from typing import Optional

from .model import EvidenceOutcome
from .uploader import PhotoUploader, UploadError

logger = logging.getLogger(__name__)

_DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")


def strip_data_uri(raw: str) -> str:
    """Remove a leading 'data:image/<fmt>;base64,' prefix if present."""
    return _DATA_URI_PREFIX.sub("", raw, count=1)


class EvidenceStore:
    """Best-effort photo evidence attachment.

    Upload problems never propagate: the caller always gets an EvidenceOutcome
    and the attendance event proceeds with the raw payload as its reference.
    """

    def __init__(self, uploader: Optional[PhotoUploader] = None):
        self._uploader = uploader

    def attach(self, raw: Optional[str]) -> EvidenceOutcome:
        if not raw:
            return EvidenceOutcome.skipped()

        if self._uploader is None:
            logger.info("No photo uploader configured; keeping raw evidence")
            return EvidenceOutcome.fallback_raw(raw, error="uploader not configured")

        try:
            url = self._uploader.upload(strip_data_uri(raw))
        except UploadError as e:
            logger.warning("Photo upload failed, falling back to raw data: %s", e)
            return EvidenceOutcome.fallback_raw(raw, error=str(e))
        except Exception as e:
            logger.warning("Unexpected photo upload failure, falling back to raw data", exc_info=True)
            return EvidenceOutcome.fallback_raw(raw, error=str(e))

        return EvidenceOutcome.uploaded(url)
