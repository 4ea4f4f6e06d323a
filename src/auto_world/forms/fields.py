"""Explicit form state: a field registry with per-field rules and errors."""

from __future__ import annotations

import copy
import math
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

from auto_world.errors import ValidationError


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def to_number(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("not a number")
    if isinstance(value, (int, float)):
        return float(value)
    return float(str(value).strip())


class Rule:
    message: str = "Invalid value"

    def check(self, value: Any) -> None:
        raise NotImplementedError


class Required(Rule):
    def __init__(self, message: str) -> None:
        self.message = message

    def check(self, value: Any) -> None:
        if is_empty(value):
            raise ValidationError(self.message)


class Number(Rule):
    def __init__(self, message: str = "Must be a number") -> None:
        self.message = message

    def check(self, value: Any) -> None:
        try:
            n = to_number(value)
        except (TypeError, ValueError):
            raise ValidationError(self.message) from None
        if not math.isfinite(n):
            raise ValidationError(self.message)


class Min(Rule):
    def __init__(self, limit: float, message: str) -> None:
        self.limit = limit
        self.message = message

    def check(self, value: Any) -> None:
        try:
            n = to_number(value)
        except (TypeError, ValueError):
            return  # left to Number
        if n < self.limit:
            raise ValidationError(self.message)


class Pattern(Rule):
    def __init__(self, pattern: str, message: str) -> None:
        self.regex = re.compile(pattern)
        self.message = message

    def check(self, value: Any) -> None:
        if not self.regex.fullmatch(str(value)):
            raise ValidationError(self.message)


class OneOf(Rule):
    def __init__(self, choices: Iterable[int], message: str) -> None:
        self.choices = frozenset(choices)
        self.message = message

    def check(self, value: Any) -> None:
        try:
            ok = int(to_number(value)) in self.choices and to_number(value).is_integer()
        except (TypeError, ValueError):
            ok = False
        if not ok:
            raise ValidationError(self.message)


@dataclass
class FieldState:
    value: Any = None
    rules: List[Rule] = field(default_factory=list)
    error: Optional[str] = None
    default: Any = None

    def validate(self) -> Optional[str]:
        """Run rules in order and keep the first failure as the field error."""
        self.error = None
        if is_empty(self.value) and not any(isinstance(r, Required) for r in self.rules):
            return None
        for rule in self.rules:
            try:
                rule.check(self.value)
            except ValidationError as e:
                self.error = e.message
                break
        return self.error


class FormState:
    """Mapping from field name to value, rules and current error."""

    def __init__(self) -> None:
        self.fields: Dict[str, FieldState] = {}

    def register(self, name: str, rules: Iterable[Rule] = (), default: Any = None) -> FieldState:
        state = FieldState(value=copy.copy(default), rules=list(rules), default=default)
        self.fields[name] = state
        return state

    def set_value(self, name: str, value: Any, validate: bool = False) -> None:
        state = self.fields[name]
        state.value = value
        if validate:
            state.validate()

    def value(self, name: str) -> Any:
        return self.fields[name].value

    def values(self) -> Dict[str, Any]:
        return {name: f.value for name, f in self.fields.items()}

    @property
    def errors(self) -> Dict[str, str]:
        return {name: f.error for name, f in self.fields.items() if f.error}

    def validate(self) -> Dict[str, str]:
        for f in self.fields.values():
            f.validate()
        return self.errors

    def reset(self) -> None:
        for f in self.fields.values():
            f.value = copy.copy(f.default)
            f.error = None


async def handle_submit(
    form: FormState, callback: Callable[[Dict[str, Any]], Awaitable[Any]]
) -> bool:
    """Validate ``form`` and run ``callback`` with its values only when it is clean."""
    if form.validate():
        return False
    await callback(form.values())
    return True
