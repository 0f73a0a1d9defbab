from __future__ import annotations

import pytest
import requests

from geo_attendance.evidence import uploader as uploader_module
from geo_attendance.evidence.uploader import ImgBBUploader, UploadError


class FakeResponse:
    def __init__(self, *, status_code: int = 200, body=None, bad_json: bool = False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._body


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    responses = []

    def fake_post(url, **kwargs):
        recorded.append({"url": url, **kwargs})
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(uploader_module.requests, "post", fake_post)
    return recorded, responses


def test_successful_upload_returns_hosted_url(calls):
    recorded, responses = calls
    responses.append(FakeResponse(body={"success": True, "data": {"url": "https://i.ibb.co/x.jpg"}}))

    url = ImgBBUploader("key123", timeout=3).upload("QUJD")

    assert url == "https://i.ibb.co/x.jpg"
    assert recorded[0]["params"] == {"key": "key123"}
    assert recorded[0]["data"] == {"image": "QUJD"}
    assert recorded[0]["timeout"] == 3


@pytest.mark.parametrize("key", [None, "", "YOUR_FREE_IMGBB_KEY"])
def test_missing_key_fails_without_network_call(calls, key):
    recorded, _ = calls

    with pytest.raises(UploadError):
        ImgBBUploader(key).upload("QUJD")

    assert recorded == []


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("network down"),
        requests.Timeout("slow"),
        FakeResponse(status_code=500, body={}),
        FakeResponse(body={"success": False}),
        FakeResponse(body={"success": True, "data": {}}),
        FakeResponse(bad_json=True),
    ],
)
def test_failures_raise_upload_error(calls, response):
    _, responses = calls
    responses.append(response)

    with pytest.raises(UploadError):
        ImgBBUploader("key123").upload("QUJD")
