from __future__ import annotations

import re

from kbobce_model.domain.exceptions import ValidationError

PATTERN = re.compile(r"[0-9]\.[0-9]{3}\.[0-9]{3}\.[0-9]{3}")
DIGITS = 10
NON_DIGIT = re.compile(r"[^0-9]")


class EstablishmentNumber(str):
    """Value Object for an establishment unit number, canonical form ``D.DDD.DDD.DDD``."""

    def __new__(cls, value: str) -> "EstablishmentNumber":
        if not cls.is_valid(value):
            raise ValidationError(
                "argument is not a valid EstablishmentNumber", {"value": value}
            )
        return str.__new__(cls, value)

    @staticmethod
    def is_valid(value: object) -> bool:
        return isinstance(value, str) and PATTERN.fullmatch(value) is not None

    @classmethod
    def parse(cls, raw: object) -> "EstablishmentNumber | None":
        if not isinstance(raw, str):
            return None
        if cls.is_valid(raw):
            return cls(raw)
        digits = NON_DIGIT.sub("", raw)
        if len(digits) != DIGITS:
            return None
        return cls(f"{digits[0]}.{digits[1:4]}.{digits[4:7]}.{digits[7:]}")

    @property
    def value(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"EstablishmentNumber({str(self)!r})"
