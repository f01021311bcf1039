from kbobce_model.application.dtos.enterprise_dto import EnterpriseDTO
from kbobce_model.domain.entities.enterprise import Enterprise
from kbobce_model.domain.repositories.interfaces import IEnterpriseRepository
from kbobce_model.infrastructure.logging import get_logger

logger = get_logger(__name__)


class RegisterEnterpriseUseCase:
    def __init__(self, repo: IEnterpriseRepository):
        self.repo = repo

    def execute(self, enterprise: Enterprise) -> EnterpriseDTO:
        replaced = self.repo.get(enterprise.enterprise_number) is not None
        self.repo.upsert(enterprise)
        logger.info(
            "enterprise_registered",
            enterprise_number=str(enterprise.enterprise_number),
            replaced=replaced,
            establishments=len(enterprise.establishments),
        )
        return EnterpriseDTO.from_domain(enterprise)
