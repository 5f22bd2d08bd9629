from decimal import Decimal

from splitshare.services.snapshot import group_from_payload, group_to_payload, groups_from_payload
from splitshare.services.summary import summarize


def test_group_from_payload():
    payload = {
        "id": "g_1",
        "name": "Поездка",
        "people": [{"id": "p_a", "name": "Аня"}, {"id": "p_b", "name": "Борис"}],
        "items": [
            {"id": "i_1", "description": "Такси", "cost": "100.00", "paid_by": "p_a", "split_with": ["p_a", "p_b"]},
            {"id": "i_2", "description": "Кофе", "cost": 4.2, "paid_by": "p_b"},
        ],
    }

    group = group_from_payload(payload)

    assert group.person_ids() == ["p_a", "p_b"]
    assert group.items[0].cost == Decimal("100.00")
    assert group.items[1].cost == Decimal("4.2")
    assert group.items[1].split_with == ()


def test_group_from_payload_coerces_bad_data():
    payload = {
        "id": "g_1",
        "name": None,
        "people": None,
        "items": [{"id": "i_1", "description": None, "cost": "NaN", "paid_by": ""}],
    }

    group = group_from_payload(payload)

    assert group.name == ""
    assert group.people == ()
    assert group.items[0].cost == 0
    assert group.items[0].paid_by is None
    assert summarize(group).total == 0


def test_group_to_payload():
    payload = {
        "id": "g_1",
        "name": "Поездка",
        "people": [{"id": "p_a", "name": "Аня"}],
        "items": [{"id": "i_1", "description": "Такси", "cost": "12.50", "paid_by": "p_a", "split_with": ["p_a"]}],
    }

    assert group_to_payload(group_from_payload(payload)) == payload


def test_groups_from_payload():
    groups = groups_from_payload([{"id": "g_1", "name": "A"}, {"id": "g_2", "name": "B"}])
    assert [group.id for group in groups] == ["g_1", "g_2"]
