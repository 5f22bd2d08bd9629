from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(slots=True, frozen=True)
class Person:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class ExpenseItem:
    id: str
    description: str
    cost: Decimal
    paid_by: Optional[str]
    split_with: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class Group:
    id: str
    name: str
    people: tuple[Person, ...] = ()
    items: tuple[ExpenseItem, ...] = ()

    def person_ids(self) -> list[str]:
        return [person.id for person in self.people]

    def find_person(self, person_id: Optional[str]) -> Optional[Person]:
        for person in self.people:
            if person.id == person_id:
                return person
        return None

    def find_item(self, item_id: str) -> Optional[ExpenseItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


@dataclass(slots=True, frozen=True)
class GroupListItem:
    id: str
    name: str
    people_count: int
    items_count: int


@dataclass(slots=True)
class BalanceSheet:
    total: Decimal
    per_head: Decimal
    balances: dict[str, Decimal] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Transfer:
    from_person: str
    to_person: str
    amount: Decimal
