"""Local image previews backed by process-local object URLs."""

from __future__ import annotations

import base64
import logging
import uuid
from typing import Dict, Iterable, List, Optional, Set

from .config import MAX_IMAGES
from .models import ImageFile


logger = logging.getLogger(__name__)


class ObjectUrlRegistry:
    """In-memory store of ``blob:`` URLs, one per previewed file.

    Mirrors browser object URL semantics: revoking an unknown or already
    revoked URL does nothing. Every revoke call is still recorded in
    ``revoked`` so callers can audit releases.
    """

    scheme = "blob:auto-world/"

    def __init__(self) -> None:
        self._objects: Dict[str, ImageFile] = {}
        self.revoked: List[str] = []

    def create(self, file: ImageFile) -> str:
        url = f"{self.scheme}{uuid.uuid4()}"
        self._objects[url] = file
        return url

    def revoke(self, url: str) -> None:
        self.revoked.append(url)
        self._objects.pop(url, None)

    @property
    def live(self) -> Set[str]:
        return set(self._objects)

    def resolve(self, url: str) -> Optional[ImageFile]:
        return self._objects.get(url)

    def data_uri(self, url: str) -> Optional[str]:
        file = self.resolve(url)
        if file is None:
            return None
        b64 = base64.b64encode(file.content).decode("ascii")
        return f"data:{file.content_type};base64,{b64}"


class PreviewSet:
    """Owned list of preview URLs for the current image selection."""

    def __init__(self, registry: ObjectUrlRegistry | None = None) -> None:
        self.registry = registry or ObjectUrlRegistry()
        self._urls: List[str] = []

    @property
    def urls(self) -> List[str]:
        return list(self._urls)

    def __len__(self) -> int:
        return len(self._urls)

    def replace(self, files: Iterable[ImageFile], limit: int = MAX_IMAGES) -> List[str]:
        self.release_all()
        kept = list(files)[:limit]
        self._urls = [self.registry.create(f) for f in kept]
        return self.urls

    def release_all(self) -> None:
        urls, self._urls = self._urls, []
        for url in urls:
            self.registry.revoke(url)
        if urls:
            logger.debug("Released %d preview url(s)", len(urls))
