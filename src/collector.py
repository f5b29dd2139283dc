"""Read the expanded form into a typed value mapping."""
from __future__ import annotations

import re
from typing import Any, Dict, Union

from commands.base import CheckboxField, NumberField, SelectField
from errors import ValidationError
from forms import RenderedControlSet


Value = Union[str, int, bool]

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_int(raw: str):
    """Return `raw` as an int if it is entirely an integer, else None."""
    text = raw.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return None


def collect(controls: RenderedControlSet) -> Dict[str, Value]:
    """Collect every field of the form, in declaration order.

    Hidden conditional fields are collected too; GET serialization drops
    them when they are empty.

    Raises:
        ValidationError: a number field holds text that is not an integer.
    """
    values: Dict[str, Value] = {}
    for field in controls.command.fields:
        control = controls.get(field.name)
        if control is None:
            continue
        raw: Any = control.value
        if isinstance(field, CheckboxField):
            values[field.name] = bool(raw)
        elif isinstance(field, NumberField):
            text = str(raw)
            if text.strip() == "":
                values[field.name] = 0
                continue
            number = parse_int(text)
            if number is None:
                raise ValidationError(
                    f"Error: Invalid number format for {field.label}: {text!r}",
                    field=field.name,
                    raw=text,
                )
            values[field.name] = number
        elif isinstance(field, SelectField):
            text = str(raw)
            number = parse_int(text) if text else None
            values[field.name] = number if number is not None else text
        else:
            values[field.name] = str(raw)
    return values


__all__ = ["collect", "parse_int"]
