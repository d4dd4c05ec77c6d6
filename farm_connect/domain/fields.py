from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from .errors import InvalidFieldError


MISSING_FIELDS_MESSAGE = "Please fill in all required fields."


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    required: bool = True
    numeric: bool = False


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, bytearray, list, tuple, dict)):
        return len(value) == 0
    return False


def parse_number(value: Any, *, field: str) -> float:
    if isinstance(value, bool):
        raise InvalidFieldError(f"{field} must be a number.", field=field)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidFieldError(f"{field} must be a number.", field=field) from None
    if not math.isfinite(number):
        raise InvalidFieldError(f"{field} must be a finite number.", field=field)
    return number


def validate_fields(
    fields: Mapping[str, Any],
    specs: Sequence[FieldSpec],
    *,
    missing_message: str = MISSING_FIELDS_MESSAGE,
) -> Dict[str, Any]:
    """
    Check presence of required fields and coerce numeric ones.

    Returns a new dict holding every declared field (strings stripped, numbers
    as floats, absent optional fields as ``None``).

    Raises:
        InvalidFieldError: on the first missing or malformed field.
    """
    cleaned: Dict[str, Any] = {}
    for spec in specs:
        value = fields.get(spec.name)
        if _is_blank(value):
            if spec.required:
                raise InvalidFieldError(missing_message, field=spec.name)
            cleaned[spec.name] = None
            continue
        if spec.numeric:
            cleaned[spec.name] = parse_number(value, field=spec.label)
        elif isinstance(value, str):
            cleaned[spec.name] = value.strip()
        else:
            cleaned[spec.name] = value
    return cleaned
