from dataclasses import dataclass

from kbobce_model.domain import validator
from kbobce_model.domain.value_objects.codes import Code, CodeKind


@dataclass(frozen=True)
class Activity:
    activity_group: Code
    nace: Code
    classification: Code

    def __post_init__(self) -> None:
        validator.is_code_of_kind(self.activity_group, CodeKind.ACTIVITY_GROUP, "activity_group")
        validator.is_code_of_kind(self.nace, CodeKind.NACE, "nace")
        validator.is_code_of_kind(self.classification, CodeKind.CLASSIFICATION, "classification")
