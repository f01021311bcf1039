from __future__ import annotations

from kbobce_model.application.dtos.attach_establishment_result import AttachEstablishmentResult
from kbobce_model.application.dtos.enterprise_dto import EnterpriseDTO
from kbobce_model.domain.entities.establishment import Establishment
from kbobce_model.domain.repositories.interfaces import IEnterpriseRepository
from kbobce_model.domain.value_objects.enterprise_number import EnterpriseNumber
from kbobce_model.infrastructure.logging import get_logger

logger = get_logger(__name__)


class AttachEstablishmentUseCase:
    """Adds an establishment to a stored enterprise by rebuilding it.

    An establishment whose number is already attached replaces the old one.
    Unknown or malformed enterprise numbers are reported in the result, not raised.
    """

    def __init__(self, repo: IEnterpriseRepository) -> None:
        self.repo = repo

    def execute(self, raw_enterprise_number: str, establishment: Establishment) -> AttachEstablishmentResult:
        number = EnterpriseNumber.parse(raw_enterprise_number)
        if number is None:
            logger.warning("enterprise_number_unparseable", raw=raw_enterprise_number)
            return AttachEstablishmentResult(
                "INVALID_NUMBER", None, f"Not an enterprise number: {raw_enterprise_number!r}"
            )

        current = self.repo.get(number)
        if current is None:
            return AttachEstablishmentResult("NOT_FOUND", None, f"Unknown enterprise {number}")

        builder = current.to_builder()
        replacing = builder.has_establishment(establishment.establishment_number)
        updated = builder.add_establishment(establishment).build()
        self.repo.upsert(updated)

        status = "REPLACED" if replacing else "ATTACHED"
        logger.info(
            "establishment_attached",
            enterprise_number=str(number),
            establishment_number=str(establishment.establishment_number),
            status=status,
        )
        return AttachEstablishmentResult(
            status,
            EnterpriseDTO.from_domain(updated),
            f"Establishment {establishment.establishment_number} {status.lower()}",
        )
