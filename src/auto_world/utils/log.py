from __future__ import annotations

import logging
from typing import Any

from auto_world.models import ImageFile


def _summarize(value: Any) -> Any:
    if isinstance(value, dict):
        out = {}
        for k, v in value.items():
            if k == "images" and isinstance(v, (list, tuple)):
                out[k] = f"{len(v)} image(s)"
            else:
                out[k] = _summarize(v)
        return out
    if isinstance(value, ImageFile):
        return f"<{value.filename} {value.size} bytes>"
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    return value


class ImagePayloadFilter(logging.Filter):
    """Logging filter that replaces image payloads in record args with a count.

    Request bodies are logged for debugging; this keeps raw file contents
    out of the terminal while leaving the rest of the message intact.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = _summarize(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(_summarize(a) for a in record.args)
        return True


def configure_logging(level: int | str = logging.INFO) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler.addFilter(ImagePayloadFilter())
    root = logging.getLogger("auto_world")
    root.handlers[:] = [handler]
    root.setLevel(level)
