from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.constants import DEFAULT_IMGBB_UPLOAD_URL, DEFAULT_UPLOAD_TIMEOUT_SECONDS, IMGBB_PLACEHOLDER_KEY

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """Raised by uploaders when the photo could not be hosted."""


class PhotoUploader(Protocol):
    """Capability: host a base64 image payload and return its public URL."""

    def upload(self, payload: str) -> str:
        raise NotImplementedError


class ImgBBUploader(PhotoUploader):
    """Uploads base64 payloads to ImgBB (https://api.imgbb.com)."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        upload_url: str = DEFAULT_IMGBB_UPLOAD_URL,
        timeout: float = DEFAULT_UPLOAD_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._upload_url = upload_url
        self._timeout = float(timeout)
        self._session = session

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key) and self._api_key != IMGBB_PLACEHOLDER_KEY

    def upload(self, payload: str) -> str:
        if not self.is_configured:
            raise UploadError("ImgBB API key is not configured")

        post = self._session.post if self._session is not None else requests.post
        try:
            resp = post(
                self._upload_url,
                params={"key": self._api_key},
                data={"image": payload},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise UploadError(f"ImgBB request failed: {e}") from e

        if not resp.ok:
            raise UploadError(f"ImgBB responded with HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise UploadError("ImgBB returned a non-JSON body") from e

        url = (body.get("data") or {}).get("url") if body.get("success") else None
        if not url:
            raise UploadError("ImgBB upload was not successful")

        logger.debug("Photo hosted at %s", url)
        return url
