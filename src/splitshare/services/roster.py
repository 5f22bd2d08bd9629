"""Изменение состава группы и списка расходов.

Все функции работают со снимком группы и возвращают новый снимок,
исходный объект не меняется.
"""

from __future__ import annotations

import secrets
from dataclasses import replace
from typing import Any, Optional

from splitshare.config import EmptyItemPolicy, FallbackPayer, get_settings
from splitshare.logging import get_logger
from splitshare.models import ExpenseItem, Group, Person
from splitshare.services.validation import (
    SnapshotValidationError,
    assert_person_in_group,
    assert_positive_cost,
    assert_unique_id,
)

log = get_logger(__name__)


def new_id(prefix: str) -> str:
    return f"{prefix}_{secrets.token_hex(5)}"


def _require_name(value: str, what: str) -> str:
    clean = (value or "").strip()
    if not clean:
        raise SnapshotValidationError(f"{what}: название не может быть пустым.")
    return clean


def create_group(name: str, group_id: Optional[str] = None) -> Group:
    group = Group(id=group_id or new_id("g"), name=_require_name(name, "Группа"))
    log.info("roster.group.created", group_id=group.id)
    return group


def add_person(group: Group, name: str, person_id: Optional[str] = None) -> Group:
    person = Person(id=person_id or new_id("p"), name=_require_name(name, "Участник"))
    assert_unique_id(group.person_ids(), person.id, "Участник")
    log.info("roster.person.added", group_id=group.id, person_id=person.id)
    return replace(group, people=(*group.people, person))


def add_item(
    group: Group,
    description: str,
    cost: Any,
    paid_by: str,
    item_id: Optional[str] = None,
) -> Group:
    amount = assert_positive_cost(cost)
    assert_person_in_group(group, paid_by)
    item = ExpenseItem(
        id=item_id or new_id("i"),
        description=(description or "").strip(),
        cost=amount,
        paid_by=paid_by,
        split_with=tuple(group.person_ids()),
    )
    assert_unique_id((existing.id for existing in group.items), item.id, "Расход")
    log.info("roster.item.added", group_id=group.id, item_id=item.id, cost=str(amount))
    return replace(group, items=(*group.items, item))


def delete_item(group: Group, item_id: str) -> Group:
    if group.find_item(item_id) is None:
        raise SnapshotValidationError(f"Расход {item_id} не найден в группе {group.id}.")
    log.info("roster.item.deleted", group_id=group.id, item_id=item_id)
    return replace(group, items=tuple(item for item in group.items if item.id != item_id))


def pick_fallback_payer(remaining: tuple[Person, ...], policy: FallbackPayer) -> Optional[str]:
    if not remaining:
        return None
    if policy == FallbackPayer.LAST_IN_ROSTER:
        return remaining[-1].id
    return remaining[0].id


def remove_person(
    group: Group,
    person_id: str,
    fallback: Optional[FallbackPayer] = None,
    empty_items: Optional[EmptyItemPolicy] = None,
) -> Group:
    settings = get_settings()
    fallback = fallback or settings.fallback_payer
    empty_items = empty_items or settings.empty_item_policy

    assert_person_in_group(group, person_id)
    remaining = tuple(person for person in group.people if person.id != person_id)
    fallback_id = pick_fallback_payer(remaining, fallback)

    kept: list[ExpenseItem] = []
    for item in group.items:
        paid_by = item.paid_by
        if paid_by == person_id:
            paid_by = fallback_id
            log.info("roster.item.reassigned", group_id=group.id, item_id=item.id, paid_by=paid_by)
        split_with = tuple(pid for pid in item.split_with if pid != person_id)
        updated = replace(item, paid_by=paid_by, split_with=split_with)

        if updated.paid_by is None or not updated.split_with:
            if empty_items == EmptyItemPolicy.REJECT:
                raise SnapshotValidationError(
                    f"После удаления участника {person_id} расход {item.id} не на кого делить."
                )
            log.info("roster.item.dropped", group_id=group.id, item_id=item.id)
            continue
        kept.append(updated)

    log.info("roster.person.removed", group_id=group.id, person_id=person_id, items_left=len(kept))
    return replace(group, people=remaining, items=tuple(kept))
