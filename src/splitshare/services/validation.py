from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Optional

from splitshare.models import Group
from splitshare.utils.money import ZERO, to_decimal


class SnapshotValidationError(ValueError):
    pass


def assert_positive_cost(cost: Any) -> Decimal:
    amount = to_decimal(cost)
    if amount <= ZERO:
        raise SnapshotValidationError("Сумма расхода должна быть больше нуля.")
    return amount


def assert_person_in_group(group: Group, person_id: Optional[str]) -> None:
    if group.find_person(person_id) is None:
        raise SnapshotValidationError(f"Участник {person_id} не состоит в группе {group.id}.")


def assert_unique_id(existing_ids: Iterable[str], new_id: str, kind: str) -> None:
    if new_id in set(existing_ids):
        raise SnapshotValidationError(f"{kind} с id {new_id} уже существует.")


def find_problems(group: Group) -> list[str]:
    problems: list[str] = []
    roster = group.person_ids()

    if len(set(roster)) != len(roster):
        problems.append("Повторяющиеся id участников.")
    item_ids = [item.id for item in group.items]
    if len(set(item_ids)) != len(item_ids):
        problems.append("Повторяющиеся id расходов.")

    for item in group.items:
        if to_decimal(item.cost) <= ZERO:
            problems.append(f"Расход {item.id}: сумма должна быть больше нуля.")
        if item.paid_by is None:
            problems.append(f"Расход {item.id}: не указан плательщик.")
        elif item.paid_by not in roster:
            problems.append(f"Расход {item.id}: плательщик {item.paid_by} не состоит в группе.")
        if not item.split_with:
            problems.append(f"Расход {item.id}: не на кого делить.")
    return problems


def assert_well_formed(group: Group) -> None:
    problems = find_problems(group)
    if problems:
        raise SnapshotValidationError(problems[0])
