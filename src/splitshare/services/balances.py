from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from splitshare.models import BalanceSheet, ExpenseItem, Person
from splitshare.utils.money import ZERO, to_decimal


def aggregate(people: Sequence[Person], items: Sequence[ExpenseItem]) -> BalanceSheet:
    """
    Баланс каждого участника: сколько заплатил минус средняя доля.

    Каждая позиция делится поровну на всех текущих участников группы,
    split_with позиции не учитывается.
    """
    balances: dict[str, Decimal] = {person.id: ZERO for person in people}

    costs = [to_decimal(item.cost) for item in items]
    total = sum(costs, ZERO)
    per_head = total / len(people) if people else ZERO

    for item, cost in zip(items, costs):
        # Плательщик не из группы ничего не получает.
        if item.paid_by is not None and item.paid_by in balances:
            balances[item.paid_by] += cost

    for person in people:
        balances[person.id] -= per_head

    return BalanceSheet(total=total, per_head=per_head, balances=balances)
