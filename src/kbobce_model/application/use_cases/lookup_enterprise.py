from kbobce_model.application.dtos.enterprise_dto import EnterpriseDTO
from kbobce_model.domain.repositories.interfaces import IEnterpriseRepository
from kbobce_model.domain.value_objects.enterprise_number import EnterpriseNumber
from kbobce_model.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LookupEnterpriseUseCase:
    def __init__(self, repo: IEnterpriseRepository):
        self.repo = repo

    def execute(self, raw_enterprise_number: str) -> EnterpriseDTO | None:
        number = EnterpriseNumber.parse(raw_enterprise_number)
        if number is None:
            logger.warning("enterprise_number_unparseable", raw=raw_enterprise_number)
            return None
        enterprise = self.repo.get(number)
        if enterprise is None:
            return None
        return EnterpriseDTO.from_domain(enterprise)
