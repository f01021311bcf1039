from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from kbobce_model.domain.entities.activity import Activity
from kbobce_model.domain.entities.address import Address
from kbobce_model.domain.entities.contact import Contact
from kbobce_model.domain.entities.denomination import Denomination
from kbobce_model.domain.entities.records_builder import RecordsBuilder, snapshot
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.establishment_number import EstablishmentNumber


@dataclass(frozen=True)
class Establishment:
    """A unit of establishment of an enterprise.

    Identity is the establishment number alone. Child collections are frozen
    snapshots of whatever iterable was passed in.
    """

    establishment_number: EstablishmentNumber
    start_date: date = field(compare=False)
    denominations: frozenset[Denomination] = field(default=frozenset(), compare=False)
    addresses: frozenset[Address] = field(default=frozenset(), compare=False)
    contacts: frozenset[Contact] = field(default=frozenset(), compare=False)
    activities: frozenset[Activity] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        if self.establishment_number is None:
            raise ValidationError("establishment_number is required", {"field": "establishment_number"})
        if not isinstance(self.establishment_number, EstablishmentNumber):
            object.__setattr__(self, "establishment_number", EstablishmentNumber(self.establishment_number))
        if not isinstance(self.start_date, date):
            raise ValidationError("start_date is required", {"field": "start_date"})
        object.__setattr__(self, "denominations", snapshot(self.denominations, Denomination, "denominations"))
        object.__setattr__(self, "addresses", snapshot(self.addresses, Address, "addresses"))
        object.__setattr__(self, "contacts", snapshot(self.contacts, Contact, "contacts"))
        object.__setattr__(self, "activities", snapshot(self.activities, Activity, "activities"))

    @staticmethod
    def builder() -> EstablishmentBuilder:
        return EstablishmentBuilder()

    def to_builder(self) -> EstablishmentBuilder:
        return (
            EstablishmentBuilder()
            .with_establishment_number(self.establishment_number)
            .with_start_date(self.start_date)
            .add_denominations(self.denominations)
            .add_addresses(self.addresses)
            .add_contacts(self.contacts)
            .add_activities(self.activities)
        )


class EstablishmentBuilder(RecordsBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._establishment_number: EstablishmentNumber | None = None
        self._start_date: date | None = None

    @property
    def establishment_number(self) -> EstablishmentNumber | None:
        return self._establishment_number

    def with_establishment_number(self, establishment_number: EstablishmentNumber) -> EstablishmentBuilder:
        self._establishment_number = establishment_number
        return self

    def with_start_date(self, start_date: date) -> EstablishmentBuilder:
        self._start_date = start_date
        return self

    def build(self) -> Establishment:
        return Establishment(
            establishment_number=self._establishment_number,  # type: ignore[arg-type]
            start_date=self._start_date,  # type: ignore[arg-type]
            **self._records(),
        )
