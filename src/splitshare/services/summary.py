from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional

from splitshare.config import get_settings
from splitshare.logging import get_logger
from splitshare.models import Group, GroupListItem, Transfer
from splitshare.services.balances import aggregate
from splitshare.services.settlement import settle
from splitshare.utils.money import format_amount

log = get_logger(__name__)


@dataclass(slots=True)
class GroupSummary:
    total: Decimal
    per_head: Decimal
    balances: dict[str, Decimal] = field(default_factory=dict)
    transfers: list[Transfer] = field(default_factory=list)

    @property
    def is_settled(self) -> bool:
        return not self.transfers


def summarize(group: Group) -> GroupSummary:
    sheet = aggregate(group.people, group.items)
    transfers = settle(sheet.balances)
    log.info(
        "summary.computed",
        group_id=group.id,
        people=len(group.people),
        items=len(group.items),
        transfers=len(transfers),
    )
    return GroupSummary(
        total=sheet.total,
        per_head=sheet.per_head,
        balances=sheet.balances,
        transfers=transfers,
    )


def _label(group: Group, person_id: str) -> str:
    person = group.find_person(person_id)
    return person.name if person and person.name else person_id


def format_summary(group: Group, summary: GroupSummary, currency: Optional[str] = None) -> str:
    currency = currency if currency is not None else get_settings().currency
    lines = [
        f"Группа: {group.name}",
        f"Всего потрачено: {format_amount(summary.total, currency)}",
        f"В среднем на человека: {format_amount(summary.per_head, currency)}",
        "\nБалансы:",
    ]
    for person_id, balance in summary.balances.items():
        lines.append(f"• {_label(group, person_id)}: {format_amount(balance, currency)}")

    lines.append("\nДля сведения долгов:")
    if summary.is_settled:
        lines.append("Все в расчёте!")
    for t in summary.transfers:
        lines.append(f"• {_label(group, t.from_person)} → {_label(group, t.to_person)}: {format_amount(t.amount, currency)}")
    return "\n".join(lines)


def build_group_list(groups: Iterable[Group]) -> list[GroupListItem]:
    return [
        GroupListItem(
            id=group.id,
            name=group.name,
            people_count=len(group.people),
            items_count=len(group.items),
        )
        for group in groups
    ]
