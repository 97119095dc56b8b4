"""
Binding of untrusted request parameters onto model instances.

A :class:`WebDataBinder` copies request values onto a target object,
skipping any field listed in ``disallowed_fields``.  When a form class
is supplied the values are validated first and every field error is
recorded in the returned :class:`~clinic.validation.ValidationOutcome`.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Type

from django import forms

from .validation import ValidationOutcome

# Request parameter name -> model attribute name
OWNER_FIELDS = {
    'id': 'id',
    'firstName': 'first_name',
    'lastName': 'last_name',
    'address': 'address',
    'city': 'city',
    'telephone': 'telephone',
}


class WebDataBinder:
    def __init__(self, target: Any, form_class: Optional[Type[forms.Form]] = None,
                 field_map: Mapping[str, str] = OWNER_FIELDS):
        self.target = target
        self.form_class = form_class
        self.field_map = dict(field_map)
        self.disallowed_fields: tuple[str, ...] = ()

    def set_disallowed_fields(self, *fields: str) -> None:
        self.disallowed_fields = tuple(fields)

    def is_allowed(self, field_name: str) -> bool:
        return field_name in self.field_map and field_name not in self.disallowed_fields

    def bind(self, data: Mapping[str, Any], validate: bool = True) -> ValidationOutcome:
        """Apply allowed values from ``data`` to the target.

        Only keys present in ``data`` are applied.  Values that failed
        validation are applied as submitted so a re-rendered form shows
        what the user typed.
        """
        outcome = ValidationOutcome()
        submitted = {k: data.get(k) for k in self.field_map if k in data and self.is_allowed(k)}
        values = dict(submitted)

        if validate and self.form_class is not None:
            form = self.form_class(data={k: v for k, v in submitted.items()})
            if form.is_valid():
                values.update({k: v for k, v in form.cleaned_data.items() if k in values})
            else:
                for name, errors in form.errors.as_data().items():
                    for error in errors:
                        for message in error.messages:
                            outcome.reject_value(name, error.code or 'invalid', message)

        for name, value in values.items():
            setattr(self.target, self.field_map[name], value)
        return outcome
