from collections.abc import Sequence
from typing import Protocol

from kbobce_model.domain.entities.enterprise import Enterprise
from kbobce_model.domain.value_objects.enterprise_number import EnterpriseNumber


class IEnterpriseRepository(Protocol):
    def upsert(self, enterprise: Enterprise) -> None: ...
    def get(self, enterprise_number: EnterpriseNumber) -> Enterprise | None: ...
    def list(self, limit: int = 100, offset: int = 0) -> Sequence[Enterprise]: ...
