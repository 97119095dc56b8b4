"""
Request-scoped result holders passed between the HTTP layer and the
controllers.

``ValidationOutcome`` accumulates field errors found while binding and
handling a form; controllers add to it and callers inspect it.
``FlashContext`` carries one-shot messages to be shown after a redirect.
``ModelAndView`` pairs a logical view name with the model it renders.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass
class ValidationOutcome:
    errors: list[FieldError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        self.errors.append(FieldError(field_name, code, message))

    def field_errors(self, field_name: str) -> list[FieldError]:
        return [e for e in self.errors if e.field == field_name]

    def as_dict(self) -> dict[str, list[str]]:
        """Messages grouped by field, in the order they were recorded."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


@dataclass
class FlashContext:
    messages: dict[str, str] = field(default_factory=dict)

    def add_flash_attribute(self, key: str, message: str) -> None:
        self.messages[key] = message


@dataclass
class ModelAndView:
    view_name: str
    model: dict[str, Any] = field(default_factory=dict)
