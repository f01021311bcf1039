from __future__ import annotations

from kbobce_model.domain.exceptions import ValidationError

LENGTHS = (9, 12)


class SocialSecurityNumber(str):
    """Value Object for the RSZ/ONSS registration number of an employer.

    The full form has 12 digits: a 3-digit indicative number, the 7-digit
    registration number and a 2-digit check number. The 9-digit form omits
    the indicative number.
    """

    def __new__(cls, value: str) -> "SocialSecurityNumber":
        if not cls.is_valid(value):
            raise ValidationError(
                "argument is not a valid SocialSecurityNumber", {"value": value}
            )
        return str.__new__(cls, value)

    @staticmethod
    def is_valid(value: object) -> bool:
        return (
            isinstance(value, str)
            and len(value) in LENGTHS
            and all(ch in "0123456789" for ch in value)
        )

    @classmethod
    def parse(cls, raw: object) -> "SocialSecurityNumber | None":
        if not isinstance(raw, str):
            return None
        digits = "".join(ch for ch in raw if ch in "0123456789")
        if not cls.is_valid(digits):
            return None
        return cls(digits)

    @property
    def value(self) -> str:
        return str(self)
