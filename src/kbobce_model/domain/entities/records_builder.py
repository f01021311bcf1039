"""Child-record staging shared by the enterprise and establishment builders."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from kbobce_model.domain import validator
from kbobce_model.domain.entities.activity import Activity
from kbobce_model.domain.entities.address import Address
from kbobce_model.domain.entities.contact import Contact
from kbobce_model.domain.entities.denomination import Denomination
from kbobce_model.domain.exceptions import ValidationError

B = TypeVar("B", bound="RecordsBuilder")
T = TypeVar("T")


def snapshot(items: Iterable[T] | None, kind: type[T], name: str) -> frozenset[T]:
    """Return an immutable copy of ``items``, rejecting foreign element types."""
    if items is None:
        return frozenset()
    result = frozenset(items)
    for item in result:
        if not isinstance(item, kind):
            raise ValidationError(
                f"{name} may only contain {kind.__name__} instances",
                {"field": name, "actual": type(item).__name__},
            )
    return result


class RecordsBuilder:
    """Mutable staging area for denominations, addresses, contacts and activities.

    Each collection has set semantics: adding an equal record twice keeps one.
    A builder is meant for a single caller and is discarded after ``build()``.
    """

    def __init__(self) -> None:
        self._denominations: set[Denomination] = set()
        self._addresses: set[Address] = set()
        self._contacts: set[Contact] = set()
        self._activities: set[Activity] = set()

    def add_denomination(self: B, denomination: Denomination) -> B:
        validator.is_not_null(denomination)
        self._denominations.add(denomination)
        return self

    def add_denominations(self: B, denominations: Iterable[Denomination]) -> B:
        for denomination in denominations:
            self.add_denomination(denomination)
        return self

    def add_address(self: B, address: Address) -> B:
        validator.is_not_null(address)
        self._addresses.add(address)
        return self

    def add_addresses(self: B, addresses: Iterable[Address]) -> B:
        for address in addresses:
            self.add_address(address)
        return self

    def add_contact(self: B, contact: Contact) -> B:
        validator.is_not_null(contact)
        self._contacts.add(contact)
        return self

    def add_contacts(self: B, contacts: Iterable[Contact]) -> B:
        for contact in contacts:
            self.add_contact(contact)
        return self

    def add_activity(self: B, activity: Activity) -> B:
        validator.is_not_null(activity)
        self._activities.add(activity)
        return self

    def add_activities(self: B, activities: Iterable[Activity]) -> B:
        for activity in activities:
            self.add_activity(activity)
        return self

    def _records(self) -> dict[str, Any]:
        return {
            "denominations": frozenset(self._denominations),
            "addresses": frozenset(self._addresses),
            "contacts": frozenset(self._contacts),
            "activities": frozenset(self._activities),
        }
