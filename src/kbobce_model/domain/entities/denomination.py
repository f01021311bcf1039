from dataclasses import dataclass

from kbobce_model.domain import validator
from kbobce_model.domain.value_objects.codes import Code, CodeKind

MAX_VALUE_LENGTH = 320


@dataclass(frozen=True)
class Denomination:
    """A registered name of an enterprise or establishment in one language."""

    language: Code
    type_of_denomination: Code
    value: str

    def __post_init__(self) -> None:
        validator.is_code_of_kind(self.language, CodeKind.LANGUAGE, "language")
        validator.is_code_of_kind(
            self.type_of_denomination, CodeKind.TYPE_OF_DENOMINATION, "type_of_denomination"
        )
        validator.is_not_blank(self.value, "value")
        validator.is_max_length(MAX_VALUE_LENGTH, self.value, "value")
