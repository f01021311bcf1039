import pytest

from kbobce_model.domain import validator
from kbobce_model.domain.exceptions import ValidationError
from kbobce_model.domain.value_objects.codes import CodeKind


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_not_blank_rejects(value):
    with pytest.raises(ValidationError):
        validator.is_not_blank(value)


def test_is_not_blank_accepts_padded_text():
    validator.is_not_blank("  x ")


def test_is_not_null_reports_position():
    with pytest.raises(ValidationError) as exc:
        validator.is_not_null("a", None, "c")
    assert exc.value.details == {"position": 1}


def test_is_max_length():
    validator.is_max_length(3, "abc")
    with pytest.raises(ValidationError):
        validator.is_max_length(3, "abcd")
    with pytest.raises(ValidationError):
        validator.is_max_length(-1, "")


def test_is_length():
    validator.is_length(2, "ab")
    with pytest.raises(ValidationError):
        validator.is_length(2, "a")
    with pytest.raises(ValidationError):
        validator.is_length(-1, "")


def test_is_not_empty():
    validator.is_not_empty([1])
    with pytest.raises(ValidationError):
        validator.is_not_empty([])
    with pytest.raises(ValidationError):
        validator.is_not_empty(None)


def test_is_code_of_kind():
    validator.is_code_of_kind(CodeKind.STATUS.of("AC"), CodeKind.STATUS, "status")
    with pytest.raises(ValidationError, match="status is required"):
        validator.is_code_of_kind(None, CodeKind.STATUS, "status")
    with pytest.raises(ValidationError, match="STATUS"):
        validator.is_code_of_kind(CodeKind.LANGUAGE.of("1"), CodeKind.STATUS, "status")
    with pytest.raises(ValidationError):
        validator.is_code_of_kind("AC", CodeKind.STATUS, "status")


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)
    err = ValidationError("boom", {"field": "x"})
    assert str(err) == "boom"
    assert "field" in repr(err)
