from __future__ import annotations

from dataclasses import dataclass

from kbobce_model.domain.entities.enterprise import Enterprise


@dataclass(frozen=True)
class EnterpriseDTO:
    enterprise_number: str
    status: str
    juridical_situation: str
    type_of_enterprise: str
    juridical_form: str | None
    start_date: str
    denominations: tuple[str, ...]
    establishment_numbers: tuple[str, ...]
    addresses: int
    contacts: int
    activities: int

    @classmethod
    def from_domain(cls, ent: Enterprise) -> "EnterpriseDTO":
        return cls(
            enterprise_number=str(ent.enterprise_number),
            status=ent.status.code,
            juridical_situation=ent.juridical_situation.code,
            type_of_enterprise=ent.type_of_enterprise.code,
            juridical_form=ent.juridical_form.code if ent.juridical_form else None,
            start_date=ent.start_date.isoformat(),
            denominations=tuple(sorted(d.value for d in ent.denominations)),
            establishment_numbers=tuple(sorted(str(e.establishment_number) for e in ent.establishments)),
            addresses=len(ent.addresses),
            contacts=len(ent.contacts),
            activities=len(ent.activities),
        )
