from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests

from auto_world.config import AppConfig
from auto_world.errors import ApiError


logger = logging.getLogger(__name__)

FilePart = Tuple[str, Tuple[Optional[str], Any, Optional[str]]]


@dataclass
class ApiResponse:
    """Status code plus parsed JSON body of a 2xx (or failed) response."""

    status_code: int
    data: Dict[str, Any] = field(default_factory=dict)


def _parse_body(resp: requests.Response) -> Dict[str, Any]:
    try:
        payload = resp.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class HttpClient:
    """Thin wrapper around ``requests.Session`` shared by the API calls.

    - Sends JSON or multipart bodies; multipart boundaries are left to requests.
    - Non-2xx responses and transport failures raise :class:`ApiError`.
    - No retries: every call is a single attempt with the configured timeout.
    """

    def __init__(self, config: AppConfig | None = None, session: requests.Session | None = None) -> None:
        self.config = config or AppConfig()
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent, "Accept": "application/json"}

    def post_json(self, url: str, body: Dict[str, Any]) -> ApiResponse:
        return self._post(url, json=body)

    def post_multipart(
        self,
        url: str,
        fields: Iterable[Tuple[str, str]],
        files: Iterable[FilePart] = (),
    ) -> ApiResponse:
        # Text fields go in as filename-less parts so the body is multipart
        # even when no file is attached.
        parts: List[FilePart] = [(name, (None, value, None)) for name, value in fields]
        parts.extend(files)
        return self._post(url, files=parts)

    def _post(self, url: str, **kwargs: Any) -> ApiResponse:
        try:
            resp = self.session.post(
                url,
                headers=self._headers(),
                timeout=self.config.request_timeout_secs,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error("POST %s failed: %s", url, e)
            raise ApiError(str(e) or e.__class__.__name__) from e

        result = ApiResponse(status_code=resp.status_code, data=_parse_body(resp))
        logger.info("POST %s -> %s", url, resp.status_code)
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise ApiError(f"Request failed with status code {resp.status_code}", response=result) from e
        return result

    def close(self) -> None:
        self.session.close()
