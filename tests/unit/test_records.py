from datetime import date

import pytest

from kbobce_model.domain.entities.activity import Activity
from kbobce_model.domain.entities.address import Address
from kbobce_model.domain.entities.contact import Contact
from kbobce_model.domain.entities.denomination import Denomination
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.codes import CodeKind
from tests.unit._factories import (
    ACTIVE, DUTCH, EMAIL, ENTERPRISE_CONTACT, MAIN, REGISTERED_OFFICE, SOCIAL_NAME, SOFTWARE, VAT_GROUP,
    activity, address, contact, denomination,
)


def test_denomination_length_limit():
    assert Denomination(DUTCH, SOCIAL_NAME, "x" * 320).value == "x" * 320
    with pytest.raises(ValidationError):
        Denomination(DUTCH, SOCIAL_NAME, "x" * 321)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_denomination_rejects_blank(value):
    with pytest.raises(ValidationError):
        Denomination(DUTCH, SOCIAL_NAME, value)


def test_denomination_checks_code_kinds():
    with pytest.raises(ValidationError):
        Denomination(ACTIVE, SOCIAL_NAME, "Acme")
    with pytest.raises(ValidationError):
        Denomination(DUTCH, None, "Acme")


def test_denomination_equality():
    assert denomination("Acme") == denomination("Acme")
    assert denomination("Acme") != denomination("Acme NV")


def test_contact_length_limit():
    assert Contact(ENTERPRISE_CONTACT, EMAIL, "a" * 254).value == "a" * 254
    with pytest.raises(ValidationError):
        Contact(ENTERPRISE_CONTACT, EMAIL, "a" * 255)
    with pytest.raises(ValidationError):
        Contact(ENTERPRISE_CONTACT, EMAIL, " ")
    with pytest.raises(ValidationError):
        Contact(EMAIL, ENTERPRISE_CONTACT, "info@acme.be")


def test_contact_equality():
    assert contact() == contact()
    assert len({contact(), contact(), contact("sales@acme.be")}) == 2


def test_activity_requires_all_codes():
    assert activity() == Activity(VAT_GROUP, SOFTWARE, MAIN)
    with pytest.raises(ValidationError):
        Activity(VAT_GROUP, None, MAIN)
    with pytest.raises(ValidationError):
        Activity(VAT_GROUP, SOFTWARE, ACTIVE)
    with pytest.raises(ValidationError):
        Activity(VAT_GROUP, CodeKind.ACTIVITY_GROUP.of("001"), MAIN)


def test_activity_distinguishes_nace_version():
    old = CodeKind.NACE.of("62010", year=2003)
    assert activity(old) != activity(SOFTWARE)


def test_address_defaults_to_empty_strings():
    addr = Address(REGISTERED_OFFICE, None, None, "1000")
    assert addr.country_nl == ""
    assert addr.country_fr == ""
    assert addr.zipcode == "1000"
    assert addr.box == ""
    assert addr.date_striking_off is None
    assert not addr.is_struck_off


def test_address_equality_includes_striking_off_date():
    current = address()
    struck = address(struck_off=date(2020, 1, 1))
    assert current != struck
    assert struck.is_struck_off
    assert current == address()
    assert len({current, address(), struck}) == 2


@pytest.mark.parametrize(
    "field, limit",
    [("country_nl", 100), ("zipcode", 20), ("municipality_fr", 200), ("street_nl", 200),
     ("house_number", 22), ("box", 20), ("extra_address_info", 80)],
)
def test_address_max_lengths(field, limit):
    assert getattr(Address(REGISTERED_OFFICE, **{field: "x" * limit}), field) == "x" * limit
    with pytest.raises(ValidationError):
        Address(REGISTERED_OFFICE, **{field: "x" * (limit + 1)})


def test_address_requires_type():
    with pytest.raises(ValidationError):
        Address(None, zipcode="1000")
    with pytest.raises(ValidationError):
        Address(REGISTERED_OFFICE, date_striking_off="2020-01-01")
