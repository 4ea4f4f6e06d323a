"""Exceptions and error classification for API calls.

Every page reduces a failed call to a single human readable message. The
order of preference is the message in the server's response body, then the
exception's own message, then a per-flow fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:  # pragma: no cover
    from .services.http import ApiResponse


class ApiError(Exception):
    """Raised by the HTTP client for transport failures and non-2xx responses.

    ``response`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, response: Optional["ApiResponse"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response


class ValidationError(Exception):
    """A single field-level validation failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Network:
    message: str


@dataclass(frozen=True)
class ServerMessage:
    message: str


@dataclass(frozen=True)
class Unknown:
    pass


ErrorKind = Union[Network, ServerMessage, Unknown]


def _body_message(data: Any) -> Optional[str]:
    if isinstance(data, dict):
        msg = data.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None


def classify_error(exc: BaseException) -> ErrorKind:
    response = getattr(exc, "response", None)
    if response is not None:
        msg = _body_message(getattr(response, "data", None))
        if msg:
            return ServerMessage(msg)
    own = getattr(exc, "message", None)
    if not isinstance(own, str):
        own = str(exc)
    if own:
        return Network(own)
    return Unknown()


def error_message(exc: BaseException, fallback: str) -> str:
    kind = classify_error(exc)
    if isinstance(kind, (ServerMessage, Network)):
        return kind.message
    return fallback
