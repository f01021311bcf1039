from dataclasses import dataclass

from kbobce_model.domain import validator
from kbobce_model.domain.value_objects.codes import Code, CodeKind

MAX_VALUE_LENGTH = 254


@dataclass(frozen=True)
class Contact:
    """Contact data (phone, email, web address) of an enterprise or establishment."""

    entity_contact: Code
    contact_type: Code
    value: str

    def __post_init__(self) -> None:
        validator.is_code_of_kind(self.entity_contact, CodeKind.ENTITY_CONTACT, "entity_contact")
        validator.is_code_of_kind(self.contact_type, CodeKind.CONTACT_TYPE, "contact_type")
        validator.is_not_blank(self.value, "value")
        validator.is_max_length(MAX_VALUE_LENGTH, self.value, "value")
