"""Precondition helpers shared by the value objects and entities.

Every helper raises :class:`ValidationError` when its precondition is not met
and returns ``None`` otherwise.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Any

from kbobce_model.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from kbobce_model.domain.value_objects.codes import CodeKind


def is_not_blank(value: str | None, name: str = "value") -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is blank", {"field": name})


def is_not_null(*values: Any) -> None:
    for index, value in enumerate(values):
        if value is None:
            raise ValidationError("at least one argument is None", {"position": index})


def is_max_length(max_length: int, value: str, name: str = "value") -> None:
    if max_length < 0:
        raise ValidationError("max_length must be a non-negative int")
    if len(value) > max_length:
        raise ValidationError(
            f"{name} has more than {max_length} characters",
            {"field": name, "max_length": max_length, "length": len(value)},
        )


def is_length(length: int, value: str, name: str = "value") -> None:
    if length < 0:
        raise ValidationError("length must be a non-negative int")
    if len(value) != length:
        raise ValidationError(
            f"{name} does not have exactly {length} characters",
            {"field": name, "length": length, "actual": len(value)},
        )


def is_not_empty(collection: Collection[Any] | None, name: str = "collection") -> None:
    if not collection:
        raise ValidationError(f"{name} is None or empty", {"field": name})


def is_code_of_kind(value: Any, kind: CodeKind, name: str) -> None:
    """Require ``value`` to be a :class:`Code` of the given kind."""
    from kbobce_model.domain.value_objects.codes import Code

    if value is None:
        raise ValidationError(f"{name} is required", {"field": name})
    if not isinstance(value, Code) or value.kind is not kind:
        raise ValidationError(
            f"{name} must be a {kind.name} code",
            {"field": name, "expected": kind.name, "actual": getattr(value, "kind", type(value).__name__)},
        )
