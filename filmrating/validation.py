"""
Request body validation.

Each entity declares its writable fields as an ordered schema table of
``FieldSpec`` rows. ``validate`` walks the table, collects every violation
(all of them, not just the first per field) and returns the normalized values
of the recognized fields. Unknown keys are dropped.

Messages are plain ``<field> <constraint>`` sentences so callers can match on
them literally.
"""
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from fastapi import Request

from filmrating.errors import ValidationException

Bound = Union[int, Callable[[], int]]

STRING = "string"
INTEGER = "integer"
STRING_LIST = "string_list"
DATE = "date"


def _resolve(bound: Bound) -> int:
    # bounds such as "current year + 5" are re-evaluated on every call
    return bound() if callable(bound) else bound


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class MinLength:
    length: int

    def check(self, name: str, value) -> Optional[str]:
        if isinstance(value, str) and len(value) >= self.length:
            return None
        return f"{name} must be longer than or equal to {self.length} characters"


@dataclass(frozen=True)
class MaxLength:
    length: int

    def check(self, name: str, value) -> Optional[str]:
        if isinstance(value, str) and len(value) <= self.length:
            return None
        return f"{name} must be shorter than or equal to {self.length} characters"


@dataclass(frozen=True)
class Min:
    bound: Bound

    def check(self, name: str, value) -> Optional[str]:
        bound = _resolve(self.bound)
        if _is_int(value) and value >= bound:
            return None
        return f"{name} must not be less than {bound}"


@dataclass(frozen=True)
class Max:
    bound: Bound

    def check(self, name: str, value) -> Optional[str]:
        bound = _resolve(self.bound)
        if _is_int(value) and value <= bound:
            return None
        return f"{name} must not be greater than {bound}"


@dataclass(frozen=True)
class ArrayNotEmpty:
    def check(self, name: str, value) -> Optional[str]:
        if isinstance(value, list) and value:
            return None
        return f"{name} should not be empty"


@dataclass(frozen=True)
class Matches:
    pattern: str
    message: Optional[str] = None

    def check(self, name: str, value) -> Optional[str]:
        if isinstance(value, str) and re.search(self.pattern, value):
            return None
        return self.message or f"{name} must match {self.pattern} regular expression"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: str
    required: bool = True
    trim: bool = False
    constraints: Tuple[Any, ...] = ()


Schema = Sequence[FieldSpec]


def partial(schema: Schema) -> Tuple[FieldSpec, ...]:
    """The same table with every field optional, for PATCH bodies."""
    return tuple(replace(spec, required=False) for spec in schema)


def _coerce(spec: FieldSpec, value) -> Tuple[Any, Optional[str]]:
    name = spec.name
    if spec.type == STRING:
        if isinstance(value, str):
            return value, None
        return value, f"{name} must be a string"
    if spec.type == INTEGER:
        if _is_int(value):
            return value, None
        if isinstance(value, float) and value.is_integer():
            return int(value), None
        return value, f"{name} must be an integer number"
    if spec.type == STRING_LIST:
        if not isinstance(value, list):
            return value, f"{name} must be an array"
        if not all(isinstance(item, str) for item in value):
            return value, f"each value in {name} must be a string"
        return list(value), None
    if spec.type == DATE:
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError:
                pass
        if isinstance(value, datetime):
            # a value without an offset is taken as UTC
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value, None
        return value, f"{name} must be a Date instance"
    raise ValueError(f"Unknown field type: {spec.type}")


def validate(schema: Schema, payload) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationException("Request body must be a JSON object")

    values: Dict[str, Any] = {}
    errors = []
    for spec in schema:
        value = payload.get(spec.name)
        if value is None and not spec.required:
            continue
        if spec.trim and isinstance(value, str):
            value = value.strip()

        field_errors = []
        if spec.required and (value is None or value == ""):
            field_errors.append(f"{spec.name} should not be empty")
        value, type_error = _coerce(spec, value)
        if type_error:
            field_errors.append(type_error)
        for constraint in spec.constraints:
            message = constraint.check(spec.name, value)
            if message and message not in field_errors:
                field_errors.append(message)

        if field_errors:
            errors.extend(field_errors)
        else:
            values[spec.name] = value

    if errors:
        raise ValidationException(*errors)
    return values


def validated_body(schema: Schema, model):
    """FastAPI dependency that validates the JSON body before the endpoint runs."""

    async def dependency(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationException("Request body must be valid JSON")
        return model.model_validate(validate(schema, payload))

    return dependency
