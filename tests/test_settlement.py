from decimal import Decimal

from splitshare.models import Transfer
from splitshare.services.settlement import apply_transfers, settle
from splitshare.utils.money import EPSILON


def test_settle_balances():
    balances = {
        "a": Decimal("60"),
        "b": Decimal("-30"),
        "c": Decimal("-30"),
    }

    transfers = settle(balances)

    assert transfers == [
        Transfer(from_person="b", to_person="a", amount=Decimal("30")),
        Transfer(from_person="c", to_person="a", amount=Decimal("30")),
    ]

    total = sum(t.amount for t in transfers)
    assert total == Decimal("60")

    after = apply_transfers(balances, transfers)
    assert all(value == 0 for value in after.values())


def test_settle_two_people():
    transfers = settle({"a": Decimal("50"), "b": Decimal("-50")})
    assert transfers == [Transfer(from_person="b", to_person="a", amount=Decimal("50"))]


def test_settle_keeps_discovery_order():
    balances = {
        "d1": Decimal("-10"),
        "c1": Decimal("5"),
        "d2": Decimal("-40"),
        "c2": Decimal("45"),
    }

    transfers = settle(balances)

    assert [(t.from_person, t.to_person, t.amount) for t in transfers] == [
        ("d1", "c1", Decimal("5")),
        ("d1", "c2", Decimal("5")),
        ("d2", "c2", Decimal("40")),
    ]


def test_settle_empty():
    assert settle({}) == []


def test_settle_dust_is_ignored():
    assert settle({"a": Decimal("0.005"), "b": Decimal("-0.005")}) == []


def test_settle_within_epsilon_is_settled():
    assert settle({"a": Decimal("0.01"), "b": Decimal("-0.01"), "c": Decimal("0")}) == []


def test_settle_no_dust_transfer_at_tail():
    transfers = settle({"a": Decimal("10.005"), "b": Decimal("-10")})
    assert transfers == [Transfer(from_person="b", to_person="a", amount=Decimal("10"))]


def test_settle_unbalanced_input():
    transfers = settle({"a": Decimal("50"), "b": Decimal("-20")})
    assert transfers == [Transfer(from_person="b", to_person="a", amount=Decimal("20"))]


def test_settle_properties():
    balances = {
        "a": Decimal("120.50"),
        "b": Decimal("-33.25"),
        "c": Decimal("-70"),
        "d": Decimal("15.75"),
        "e": Decimal("-33"),
    }

    transfers = settle(balances)

    debtors = sum(1 for v in balances.values() if v < -EPSILON)
    creditors = sum(1 for v in balances.values() if v > EPSILON)
    assert len(transfers) <= debtors + creditors - 1
    assert all(t.amount > 0 for t in transfers)
    assert all(t.amount >= EPSILON for t in transfers)
    assert all(t.from_person != t.to_person for t in transfers)

    after = apply_transfers(balances, transfers)
    assert all(abs(value) <= EPSILON for value in after.values())


def test_settle_is_idempotent():
    balances = {"a": Decimal("-12.34"), "b": Decimal("20"), "c": Decimal("-7.66")}
    assert settle(balances) == settle(balances)
    assert balances == {"a": Decimal("-12.34"), "b": Decimal("20"), "c": Decimal("-7.66")}
