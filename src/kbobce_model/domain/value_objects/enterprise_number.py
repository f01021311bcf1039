from __future__ import annotations

import re

from kbobce_model.domain.exceptions import ValidationError

PATTERN = re.compile(r"0[0-9]{3}\.[0-9]{3}\.[0-9]{3}")
DIGITS = 10
MAX_LONG = 999_999_999
NON_DIGIT = re.compile(r"[^0-9]")


class EnterpriseNumber(str):
    """Value Object for the KBO/BCE enterprise number, canonical form ``0DDD.DDD.DDD``.

    The constructor is strict and raises :class:`ValidationError`; :meth:`parse`
    is lenient and returns ``None`` on input it cannot normalise.
    """

    def __new__(cls, value: str) -> "EnterpriseNumber":
        if not cls.is_valid(value):
            raise ValidationError(
                "argument is not a valid EnterpriseNumber", {"value": value}
            )
        return str.__new__(cls, value)

    @staticmethod
    def is_valid(value: object) -> bool:
        return isinstance(value, str) and PATTERN.fullmatch(value) is not None

    @classmethod
    def parse(cls, raw: object) -> "EnterpriseNumber | None":
        """Normalise ``raw`` (e.g. ``"BE 0123 456 789"``) or return ``None``.

        All non-digit characters are dropped; exactly ten digits must remain.
        """
        if not isinstance(raw, str):
            return None
        if cls.is_valid(raw):
            return cls(raw)
        digits = NON_DIGIT.sub("", raw)
        if len(digits) != DIGITS:
            return None
        candidate = f"{digits[:4]}.{digits[4:7]}.{digits[7:]}"
        if cls.is_valid(candidate):
            return cls(candidate)
        return None

    @classmethod
    def from_long(cls, number: int) -> "EnterpriseNumber | None":
        """Inverse of :meth:`as_long`."""
        if number < 0 or number > MAX_LONG:
            return None
        return cls.parse(f"{number:010d}")

    @property
    def value(self) -> str:
        return str(self)

    def as_long(self) -> int:
        # skips the leading 0 and both dots
        return int(self[1:4] + self[5:8] + self[9:])

    def __repr__(self) -> str:
        return f"EnterpriseNumber({str(self)!r})"
