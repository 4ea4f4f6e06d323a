"""Submission state shared by the page controllers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    pass


@dataclass(frozen=True)
class Succeeded:
    message: str


@dataclass(frozen=True)
class Failed:
    message: str


SubmissionState = Union[Idle, Submitting, Succeeded, Failed]


def message_of(state: SubmissionState) -> Optional[str]:
    if isinstance(state, (Succeeded, Failed)):
        return state.message
    return None
