from __future__ import annotations

import base64

import pytest

from auto_world.models import ImageFile
from auto_world.previews import ObjectUrlRegistry, PreviewSet


@pytest.mark.parametrize("n", range(0, 21))
def test_selection_keeps_at_most_eight(n, images):
    previews = PreviewSet()
    urls = previews.replace(images(n))
    assert len(urls) == len(previews) == min(n, 8)
    assert previews.registry.live == set(urls)


class CountingRegistry(ObjectUrlRegistry):
    def __init__(self) -> None:
        super().__init__()
        self.peak = 0

    def create(self, file: ImageFile) -> str:
        url = super().create(file)
        self.peak = max(self.peak, len(self.live))
        return url


def test_reselect_releases_previous_handles_first(images):
    registry = CountingRegistry()
    previews = PreviewSet(registry)
    first = previews.replace(images(8))
    second = previews.replace(images(5))
    assert registry.peak == 8
    assert registry.revoked == first
    assert registry.live == set(second)
    assert not set(first) & set(second)


def test_release_all_is_idempotent(images):
    registry = ObjectUrlRegistry()
    previews = PreviewSet(registry)
    urls = previews.replace(images(3))
    previews.release_all()
    previews.release_all()
    assert registry.revoked == urls
    assert registry.live == set()
    assert previews.urls == []


def test_revoking_unknown_url_is_noop():
    registry = ObjectUrlRegistry()
    registry.revoke("blob:auto-world/missing")
    assert registry.live == set()
    assert registry.revoked == ["blob:auto-world/missing"]


def test_data_uri_embeds_image_bytes():
    registry = ObjectUrlRegistry()
    url = registry.create(ImageFile(filename="a.png", content=b"\x89PNG", content_type="image/png"))
    assert url.startswith("blob:auto-world/")
    assert registry.data_uri(url) == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()
    registry.revoke(url)
    assert registry.data_uri(url) is None
