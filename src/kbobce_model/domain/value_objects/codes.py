"""Reference-table codes of the KBO/BCE data set.

Each code table (status, juridical form, NACE, ...) is one :class:`CodeKind`.
A :class:`Code` pairs a kind with its short code string and the optional
Dutch, French and German descriptions published alongside it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from kbobce_model.domain import validator
from kbobce_model.domain.exceptions import ValidationError

LANGUAGES = ("NL", "FR", "DE")
NACE_YEARS = (2003, 2008)


class CodeKind(Enum):
    """Code tables with their length contract: (table, length, exact).

    The table name keeps members with the same contract distinct.
    """

    LANGUAGE = ("Language", 1, True)
    TYPE_OF_ENTERPRISE = ("TypeOfEnterprise", 1, True)
    STATUS = ("Status", 2, True)
    JURIDICAL_FORM = ("JuridicalForm", 3, True)
    JURIDICAL_SITUATION = ("JuridicalSituation", 3, True)
    TYPE_OF_DENOMINATION = ("TypeOfDenomination", 3, True)
    TYPE_OF_ADDRESS = ("TypeOfAddress", 4, True)
    CLASSIFICATION = ("Classification", 4, True)
    ENTITY_CONTACT = ("EntityContact", 3, False)
    CONTACT_TYPE = ("ContactType", 5, False)
    ACTIVITY_GROUP = ("ActivityGroup", 6, False)
    NACE = ("Nace", None, False)

    def __init__(self, table: str, length: int | None, exact: bool) -> None:
        self.table = table
        self.length = length
        self.exact = exact

    def is_valid(self, code: object) -> bool:
        """Return True if ``code`` satisfies this kind's length contract."""
        if not isinstance(code, str) or not code.strip():
            return False
        if self.length is None:
            return True
        if self.exact:
            return len(code) == self.length
        return len(code) <= self.length

    def of(
        self,
        code: str,
        *,
        nl: str | None = None,
        fr: str | None = None,
        de: str | None = None,
        year: int | None = None,
    ) -> Code:
        return Code(self, code, nl=nl, fr=fr, de=de, year=year)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Code:
    """An entry of a KBO/BCE code table.

    Identity is ``(kind, code, year)``; the descriptions are metadata and do not
    take part in equality or hashing. ``year`` is the NACE nomenclature version
    and must be ``None`` for every other kind.
    """

    kind: CodeKind
    code: str
    nl: str | None = field(default=None, compare=False)
    fr: str | None = field(default=None, compare=False)
    de: str | None = field(default=None, compare=False)
    year: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, CodeKind):
            raise ValidationError("kind must be a CodeKind", {"kind": self.kind})
        validator.is_not_blank(self.code, "code")
        if self.kind.length is not None:
            if self.kind.exact:
                validator.is_length(self.kind.length, self.code, f"{self.kind.name} code")
            else:
                validator.is_max_length(self.kind.length, self.code, f"{self.kind.name} code")
        if self.kind is CodeKind.NACE:
            if self.year not in NACE_YEARS:
                raise ValidationError("Nace year must be 2003 or 2008", {"year": self.year})
        elif self.year is not None:
            raise ValidationError(
                f"year only applies to NACE codes, not {self.kind.name}", {"year": self.year}
            )

    @classmethod
    def from_descriptions(
        cls,
        kind: CodeKind,
        code: str,
        descriptions: Mapping[str, str],
        year: int | None = None,
    ) -> Code:
        """Build a code from a ``{"NL": ..., "FR": ..., "DE": ...}`` mapping."""
        validator.is_not_null(descriptions)
        return cls(
            kind,
            code,
            nl=descriptions.get("NL"),
            fr=descriptions.get("FR"),
            de=descriptions.get("DE"),
            year=year,
        )

    @property
    def descriptions(self) -> dict[str, str]:
        found = {"NL": self.nl, "FR": self.fr, "DE": self.de}
        return {lang: text for lang, text in found.items() if text is not None}

    def description(self, language: str) -> str | None:
        lang = language.upper()
        if lang not in LANGUAGES:
            raise ValidationError(f"unsupported language {language!r}", {"language": language})
        return self.descriptions.get(lang)

    def __str__(self) -> str:
        return self.code
