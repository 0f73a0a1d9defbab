from __future__ import annotations

import logging

from geo_attendance.core.enums import EvidenceKind
from geo_attendance.evidence.store import EvidenceStore, strip_data_uri
from geo_attendance.evidence.uploader import UploadError


class RecordingUploader:
    def __init__(self, url: str = "https://i.ibb.co/abc/photo.jpg"):
        self.url = url
        self.payloads: list[str] = []

    def upload(self, payload: str) -> str:
        self.payloads.append(payload)
        return self.url


class FailingUploader:
    def __init__(self, exc: Exception):
        self.exc = exc

    def upload(self, payload: str) -> str:
        raise self.exc


def test_no_photo_is_skipped():
    store = EvidenceStore(RecordingUploader())

    for raw in (None, ""):
        outcome = store.attach(raw)
        assert outcome.kind == EvidenceKind.SKIPPED
        assert outcome.reference is None


def test_upload_strips_data_uri_and_returns_url():
    uploader = RecordingUploader()
    store = EvidenceStore(uploader)

    outcome = store.attach("data:image/jpeg;base64,QUJDRA==")

    assert outcome.kind == EvidenceKind.UPLOADED
    assert outcome.reference == "https://i.ibb.co/abc/photo.jpg"
    assert uploader.payloads == ["QUJDRA=="]


def test_upload_failure_falls_back_to_raw(caplog):
    raw = "data:image/png;base64,QUJDRA=="
    store = EvidenceStore(FailingUploader(UploadError("ImgBB request failed: timeout")))

    with caplog.at_level(logging.WARNING):
        outcome = store.attach(raw)

    assert outcome.kind == EvidenceKind.FALLBACK_RAW
    assert outcome.reference == raw
    assert "timeout" in outcome.error
    assert "falling back" in caplog.text


def test_unexpected_uploader_error_is_swallowed():
    store = EvidenceStore(FailingUploader(RuntimeError("boom")))

    outcome = store.attach("QUJDRA==")

    assert outcome.kind == EvidenceKind.FALLBACK_RAW
    assert outcome.reference == "QUJDRA=="


def test_without_uploader_raw_data_is_kept():
    outcome = EvidenceStore(None).attach("QUJDRA==")

    assert outcome.kind == EvidenceKind.FALLBACK_RAW
    assert outcome.reference == "QUJDRA=="


def test_strip_data_uri_leaves_plain_base64_untouched():
    assert strip_data_uri("QUJDRA==") == "QUJDRA=="
    assert strip_data_uri("data:image/webp;base64,xyz") == "xyz"
