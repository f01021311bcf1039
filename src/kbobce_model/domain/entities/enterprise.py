from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from kbobce_model.domain import validator
from kbobce_model.domain.entities.activity import Activity
from kbobce_model.domain.entities.address import Address
from kbobce_model.domain.entities.contact import Contact
from kbobce_model.domain.entities.denomination import Denomination
from kbobce_model.domain.entities.establishment import Establishment
from kbobce_model.domain.entities.records_builder import RecordsBuilder, snapshot
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.codes import Code, CodeKind
from kbobce_model.domain.value_objects.enterprise_number import EnterpriseNumber
from kbobce_model.domain.value_objects.establishment_number import EstablishmentNumber
from kbobce_model.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _latest_per_number(establishments: Iterable[Establishment] | None) -> list[Establishment]:
    if establishments is None:
        return []
    staged: dict[EstablishmentNumber, Establishment] = {}
    for establishment in establishments:
        if not isinstance(establishment, Establishment):
            raise ValidationError(
                "establishments may only contain Establishment instances",
                {"field": "establishments", "actual": type(establishment).__name__},
            )
        staged[establishment.establishment_number] = establishment
    return list(staged.values())


@dataclass(frozen=True)
class Enterprise:
    """A registered Belgian enterprise, keyed by its enterprise number.

    Construct instances through :meth:`builder`. Instances are immutable: to
    change one, call :meth:`to_builder`, stage the changes and build a new
    instance. Equality and hashing use the enterprise number only.

    ``juridical_form`` is optional; natural persons have none. All child
    collections are frozen snapshots and default to empty. When two
    establishments share a number, the last one given is kept.
    """

    enterprise_number: EnterpriseNumber
    status: Code = field(compare=False)
    juridical_situation: Code = field(compare=False)
    type_of_enterprise: Code = field(compare=False)
    start_date: date = field(compare=False)
    juridical_form: Code | None = field(default=None, compare=False)
    denominations: frozenset[Denomination] = field(default=frozenset(), compare=False)
    addresses: frozenset[Address] = field(default=frozenset(), compare=False)
    contacts: frozenset[Contact] = field(default=frozenset(), compare=False)
    activities: frozenset[Activity] = field(default=frozenset(), compare=False)
    establishments: frozenset[Establishment] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        if self.enterprise_number is None:
            raise ValidationError("enterprise_number is required", {"field": "enterprise_number"})
        if not isinstance(self.enterprise_number, EnterpriseNumber):
            object.__setattr__(self, "enterprise_number", EnterpriseNumber(self.enterprise_number))
        validator.is_code_of_kind(self.status, CodeKind.STATUS, "status")
        validator.is_code_of_kind(self.juridical_situation, CodeKind.JURIDICAL_SITUATION, "juridical_situation")
        validator.is_code_of_kind(self.type_of_enterprise, CodeKind.TYPE_OF_ENTERPRISE, "type_of_enterprise")
        if not isinstance(self.start_date, date):
            raise ValidationError("start_date is required", {"field": "start_date"})
        if self.juridical_form is not None:
            validator.is_code_of_kind(self.juridical_form, CodeKind.JURIDICAL_FORM, "juridical_form")
        object.__setattr__(self, "denominations", snapshot(self.denominations, Denomination, "denominations"))
        object.__setattr__(self, "addresses", snapshot(self.addresses, Address, "addresses"))
        object.__setattr__(self, "contacts", snapshot(self.contacts, Contact, "contacts"))
        object.__setattr__(self, "activities", snapshot(self.activities, Activity, "activities"))
        object.__setattr__(self, "establishments", frozenset(_latest_per_number(self.establishments)))

    @staticmethod
    def builder() -> EnterpriseBuilder:
        return EnterpriseBuilder()

    def to_builder(self) -> EnterpriseBuilder:
        return (
            EnterpriseBuilder()
            .with_enterprise_number(self.enterprise_number)
            .with_status(self.status)
            .with_juridical_situation(self.juridical_situation)
            .with_type_of_enterprise(self.type_of_enterprise)
            .with_juridical_form(self.juridical_form)
            .with_start_date(self.start_date)
            .add_denominations(self.denominations)
            .add_addresses(self.addresses)
            .add_contacts(self.contacts)
            .add_activities(self.activities)
            .add_establishments(self.establishments)
        )

    def establishment(self, establishment_number: str) -> Establishment | None:
        return next(
            (e for e in self.establishments if e.establishment_number == establishment_number),
            None,
        )


class EnterpriseBuilder(RecordsBuilder):
    """Fluent builder for :class:`Enterprise`.

    Establishments are staged per establishment number: adding one whose
    number is already staged replaces the earlier entry.
    """

    def __init__(self) -> None:
        super().__init__()
        self._enterprise_number: EnterpriseNumber | None = None
        self._status: Code | None = None
        self._juridical_situation: Code | None = None
        self._type_of_enterprise: Code | None = None
        self._juridical_form: Code | None = None
        self._start_date: date | None = None
        self._establishments: dict[EstablishmentNumber, Establishment] = {}

    @property
    def enterprise_number(self) -> EnterpriseNumber | None:
        return self._enterprise_number

    def with_enterprise_number(self, enterprise_number: EnterpriseNumber) -> EnterpriseBuilder:
        self._enterprise_number = enterprise_number
        return self

    def with_status(self, status: Code) -> EnterpriseBuilder:
        self._status = status
        return self

    def with_juridical_situation(self, juridical_situation: Code) -> EnterpriseBuilder:
        self._juridical_situation = juridical_situation
        return self

    def with_type_of_enterprise(self, type_of_enterprise: Code) -> EnterpriseBuilder:
        self._type_of_enterprise = type_of_enterprise
        return self

    def with_juridical_form(self, juridical_form: Code | None) -> EnterpriseBuilder:
        self._juridical_form = juridical_form
        return self

    def with_start_date(self, start_date: date) -> EnterpriseBuilder:
        self._start_date = start_date
        return self

    def add_establishment(self, establishment: Establishment) -> EnterpriseBuilder:
        validator.is_not_null(establishment)
        number = establishment.establishment_number
        if number in self._establishments:
            logger.debug(
                "establishment_replaced",
                enterprise_number=self._enterprise_number,
                establishment_number=str(number),
            )
        self._establishments[number] = establishment
        return self

    def add_establishments(self, establishments: Iterable[Establishment]) -> EnterpriseBuilder:
        for establishment in establishments:
            self.add_establishment(establishment)
        return self

    def has_establishment(self, establishment_number: str) -> bool:
        return establishment_number in self._establishments

    def build(self) -> Enterprise:
        return Enterprise(
            enterprise_number=self._enterprise_number,  # type: ignore[arg-type]
            status=self._status,  # type: ignore[arg-type]
            juridical_situation=self._juridical_situation,  # type: ignore[arg-type]
            type_of_enterprise=self._type_of_enterprise,  # type: ignore[arg-type]
            start_date=self._start_date,  # type: ignore[arg-type]
            juridical_form=self._juridical_form,
            establishments=frozenset(self._establishments.values()),
            **self._records(),
        )
