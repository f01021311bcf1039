import pytest

from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.social_security_number import SocialSecurityNumber


@pytest.mark.parametrize("value", ["123456789012", "123456789"])
def test_valid_forms(value):
    assert SocialSecurityNumber(value).value == value


@pytest.mark.parametrize("value", [None, "", "12345678901", "1234567890123", "12345678901a"])
def test_invalid_forms(value):
    with pytest.raises(ValidationError):
        SocialSecurityNumber(value)


def test_parse_strips_separators():
    assert SocialSecurityNumber.parse("123-4567890-12") == "123456789012"
    assert SocialSecurityNumber.parse("1234567-89") == "123456789"
    assert SocialSecurityNumber.parse("12345") is None
    assert SocialSecurityNumber.parse(None) is None
    assert SocialSecurityNumber.parse(123456789) is None
