from __future__ import annotations

import logging
from typing import List, Tuple

from auto_world.config import AppConfig
from auto_world.models import SubmitCarRequest

from .http import ApiResponse, FilePart, HttpClient


logger = logging.getLogger(__name__)


def number_text(value: float | int) -> str:
    """Render a number the way a browser form would: ``100`` not ``100.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_car_form(request: SubmitCarRequest) -> Tuple[List[Tuple[str, str]], List[FilePart]]:
    """Split a listing into multipart text fields and ``images`` file parts.

    File parts keep the selection order.
    """
    fields = [
        ("carModel", request.car_model),
        ("price", number_text(request.price)),
        ("phoneNumber", request.phone_number),
        ("numOfPictures", number_text(request.num_of_pictures)),
    ]
    files: List[FilePart] = [
        ("images", (img.filename, img.content, img.content_type)) for img in request.images
    ]
    return fields, files


def submit_car(
    request: SubmitCarRequest,
    client: HttpClient | None = None,
    config: AppConfig | None = None,
) -> ApiResponse:
    cfg = config or (client.config if client else AppConfig())
    http = client or HttpClient(cfg)
    fields, files = build_car_form(request)
    logger.debug("Request body: %s", {"fields": dict(fields), "images": request.images})
    return http.post_multipart(cfg.base_url.cars, fields, files)
