from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from kbobce_model.domain import validator
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.codes import Code, CodeKind

MAX_LENGTHS = {
    "country_nl": 100,
    "country_fr": 100,
    "zipcode": 20,
    "municipality_nl": 200,
    "municipality_fr": 200,
    "street_nl": 200,
    "street_fr": 200,
    "house_number": 22,
    "box": 20,
    "extra_address_info": 80,
}


@dataclass(frozen=True)
class Address:
    """An address of an enterprise or establishment.

    Every text field is optional; ``None`` is stored as an empty string. The
    country fields are only filled for addresses outside Belgium.
    ``date_striking_off`` is ``None`` while the address is in force.
    """

    type_of_address: Code
    country_nl: str = ""
    country_fr: str = ""
    zipcode: str = ""
    municipality_nl: str = ""
    municipality_fr: str = ""
    street_nl: str = ""
    street_fr: str = ""
    house_number: str = ""
    box: str = ""
    extra_address_info: str = ""
    date_striking_off: date | None = None

    def __post_init__(self) -> None:
        validator.is_code_of_kind(self.type_of_address, CodeKind.TYPE_OF_ADDRESS, "type_of_address")
        for name, max_length in MAX_LENGTHS.items():
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
                continue
            validator.is_max_length(max_length, value, name)
        if self.date_striking_off is not None and not isinstance(self.date_striking_off, date):
            raise ValidationError("date_striking_off must be a date", {"field": "date_striking_off"})

    @property
    def is_struck_off(self) -> bool:
        return self.date_striking_off is not None
