from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Mapping

from splitshare.models import Transfer
from splitshare.utils.money import EPSILON


@dataclass(slots=True)
class _Position:
    person_id: str
    remaining: Decimal


def settle(balances: Mapping[str, Decimal]) -> List[Transfer]:
    debtors: list[_Position] = []
    creditors: list[_Position] = []

    # Порядок обхода словаря сохраняется, без сортировки по сумме.
    for person_id, balance in balances.items():
        if balance < -EPSILON:
            debtors.append(_Position(person_id, -balance))
        elif balance > EPSILON:
            creditors.append(_Position(person_id, balance))

    transfers: list[Transfer] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        pay = min(debtor.remaining, creditor.remaining)
        transfers.append(Transfer(from_person=debtor.person_id, to_person=creditor.person_id, amount=pay))

        debtor.remaining -= pay
        creditor.remaining -= pay

        if debtor.remaining < EPSILON:
            i += 1
        if creditor.remaining < EPSILON:
            j += 1

    return transfers


def apply_transfers(balances: Mapping[str, Decimal], transfers: Iterable[Transfer]) -> dict[str, Decimal]:
    result = dict(balances)
    for transfer in transfers:
        result[transfer.from_person] = result.get(transfer.from_person, Decimal("0")) + transfer.amount
        result[transfer.to_person] = result.get(transfer.to_person, Decimal("0")) - transfer.amount
    return result
