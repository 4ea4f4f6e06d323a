from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Tuple

import pytest

from auto_world.config import AppConfig
from auto_world.errors import ApiError
from auto_world.models import ImageFile
from auto_world.services.http import ApiResponse, HttpClient


class FakeHttpClient(HttpClient):
    """Records outgoing posts and answers with a canned response or error."""

    def __init__(
        self,
        status_code: int = 200,
        data: Optional[Dict[str, Any]] = None,
        error: Optional[BaseException] = None,
        config: Optional[AppConfig] = None,
        gate: Optional[threading.Event] = None,
    ) -> None:
        super().__init__(config or AppConfig(login_redirect_delay_secs=0.05))
        self.status_code = status_code
        self.data = data or {}
        self.error = error
        self.gate = gate
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def _post(self, url: str, **kwargs: Any) -> ApiResponse:
        self.calls.append((url, kwargs))
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        resp = ApiResponse(self.status_code, dict(self.data))
        if self.status_code >= 400:
            raise ApiError(f"Request failed with status code {self.status_code}", response=resp)
        return resp


def make_image(i: int = 0) -> ImageFile:
    return ImageFile(filename=f"car{i}.jpg", content=b"img-%d" % i, content_type="image/jpeg")


@pytest.fixture
def fake_client():
    return FakeHttpClient


@pytest.fixture
def images():
    def _images(n: int) -> List[ImageFile]:
        return [make_image(i) for i in range(n)]

    return _images
