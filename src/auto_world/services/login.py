from __future__ import annotations

import logging

from auto_world.config import AppConfig
from auto_world.models import Credentials

from .http import ApiResponse, HttpClient


logger = logging.getLogger(__name__)


def login(
    credentials: Credentials,
    client: HttpClient | None = None,
    config: AppConfig | None = None,
) -> ApiResponse:
    """POST the credentials as JSON to ``{USER_BASE}/login``."""
    cfg = config or (client.config if client else AppConfig())
    http = client or HttpClient(cfg)
    url = f"{cfg.base_url.user.rstrip('/')}/login"
    logger.debug("Logging in as %s", credentials.email)
    return http.post_json(url, credentials.model_dump())
