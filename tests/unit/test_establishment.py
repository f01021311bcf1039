from datetime import date

import pytest

from kbobce_model.domain.entities.establishment import Establishment
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.establishment_number import EstablishmentNumber
from tests.unit._factories import START, activity, address, contact, denomination, establishment


def test_builder_collects_children():
    est = (
        Establishment.builder()
        .with_establishment_number(EstablishmentNumber("2.123.456.789"))
        .with_start_date(START)
        .add_denomination(denomination("Acme Gent"))
        .add_denominations([denomination("Acme Gent"), denomination("Acme Ghent")])
        .add_address(address())
        .add_contacts([contact(), contact()])
        .add_activity(activity())
        .build()
    )
    assert len(est.denominations) == 2
    assert est.addresses == frozenset({address()})
    assert len(est.contacts) == 1
    assert len(est.activities) == 1
    assert isinstance(est.denominations, frozenset)


def test_children_default_to_empty():
    est = Establishment.builder().with_establishment_number(EstablishmentNumber("2.123.456.789")).with_start_date(START).build()
    assert est.denominations == frozenset()
    assert est.addresses == frozenset()
    assert est.contacts == frozenset()
    assert est.activities == frozenset()


def test_build_requires_number_and_start_date():
    with pytest.raises(ValidationError, match="establishment_number"):
        Establishment.builder().with_start_date(START).build()
    with pytest.raises(ValidationError, match="start_date"):
        Establishment.builder().with_establishment_number(EstablishmentNumber("2.123.456.789")).build()


def test_builder_mutation_after_build_is_not_observable():
    builder = Establishment.builder().with_establishment_number(EstablishmentNumber("2.123.456.789")).with_start_date(START)
    built = builder.build()
    builder.add_denomination(denomination("Later"))
    assert built.denominations == frozenset()
    assert len(builder.build().denominations) == 1


def test_identity_is_establishment_number():
    assert establishment(start=date(2001, 1, 1)) == establishment(start=date(2010, 1, 1))
    assert establishment("2.123.456.789") != establishment("2.123.456.790")


def test_plain_string_number_is_coerced():
    est = Establishment("2.123.456.789", START)
    assert isinstance(est.establishment_number, EstablishmentNumber)
    with pytest.raises(ValidationError):
        Establishment("2123456789", START)


def test_rejects_foreign_children():
    with pytest.raises(ValidationError):
        Establishment(EstablishmentNumber("2.123.456.789"), START, denominations=[contact()])


def test_to_builder_creates_updated_copy():
    est = establishment()
    updated = est.to_builder().add_contact(contact()).build()
    assert updated == est
    assert est.contacts == frozenset()
    assert updated.contacts == frozenset({contact()})
    assert updated.denominations == est.denominations
    assert updated.start_date == est.start_date
    assert est.to_builder().establishment_number == est.establishment_number


def test_is_frozen():
    est = establishment()
    with pytest.raises(AttributeError):
        est.start_date = date.today()
