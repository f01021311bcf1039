from __future__ import annotations

from dataclasses import dataclass

from kbobce_model.application.dtos.enterprise_dto import EnterpriseDTO


@dataclass(frozen=True)
class AttachEstablishmentResult:
    status: str  # "ATTACHED" | "REPLACED" | "NOT_FOUND" | "INVALID_NUMBER"
    enterprise: EnterpriseDTO | None
    message: str
