from collections.abc import Sequence

from kbobce_model.domain.entities.enterprise import Enterprise
from kbobce_model.domain.repositories.interfaces import IEnterpriseRepository
from kbobce_model.domain.value_objects.enterprise_number import EnterpriseNumber


class InMemoryEnterpriseRepository(IEnterpriseRepository):
    """Keeps enterprises in insertion order, keyed by enterprise number."""

    def __init__(self) -> None:
        self._data: dict[EnterpriseNumber, Enterprise] = {}

    def upsert(self, enterprise: Enterprise) -> None:
        self._data[enterprise.enterprise_number] = enterprise

    def get(self, enterprise_number: EnterpriseNumber) -> Enterprise | None:
        return self._data.get(enterprise_number)

    def list(self, limit: int = 100, offset: int = 0) -> Sequence[Enterprise]:
        return list(self._data.values())[offset : offset + limit]

    def __len__(self) -> int:
        return len(self._data)
