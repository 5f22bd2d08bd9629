from __future__ import annotations

from typing import Any, Iterable, Mapping

from splitshare.models import ExpenseItem, Group, Person
from splitshare.utils.money import to_decimal


def _build_person(row: Mapping[str, Any]) -> Person:
    return Person(id=str(row["id"]), name=str(row.get("name") or ""))


def _build_item(row: Mapping[str, Any]) -> ExpenseItem:
    paid_by = row.get("paid_by")
    return ExpenseItem(
        id=str(row["id"]),
        description=str(row.get("description") or ""),
        cost=to_decimal(row.get("cost")),
        paid_by=str(paid_by) if paid_by else None,
        split_with=tuple(str(pid) for pid in row.get("split_with") or ()),
    )


def group_from_payload(payload: Mapping[str, Any]) -> Group:
    """Снимок группы из ответа API: {id, name, people: [...], items: [...]}."""
    return Group(
        id=str(payload["id"]),
        name=str(payload.get("name") or ""),
        people=tuple(_build_person(row) for row in payload.get("people") or ()),
        items=tuple(_build_item(row) for row in payload.get("items") or ()),
    )


def groups_from_payload(rows: Iterable[Mapping[str, Any]]) -> list[Group]:
    return [group_from_payload(row) for row in rows]


def group_to_payload(group: Group) -> dict[str, Any]:
    return {
        "id": group.id,
        "name": group.name,
        "people": [{"id": person.id, "name": person.name} for person in group.people],
        "items": [
            {
                "id": item.id,
                "description": item.description,
                "cost": str(item.cost),
                "paid_by": item.paid_by,
                "split_with": list(item.split_with),
            }
            for item in group.items
        ],
    }
