import pytest

from roomsplit.core.utils import round2
from roomsplit.services.balance_service import calculate_balances
from roomsplit.services.split_service import build_equal_splits
from conftest import make_expense


def test_payer_is_owed_the_other_share():
    expenses = [make_expense("e1", "U1", 100, {"U1": 50, "U2": 50})]
    assert calculate_balances(expenses, ["U1", "U2"]) == {"U1": 50, "U2": -50}


def test_members_without_activity_appear_at_zero():
    expenses = [make_expense("e1", "U1", 100, {"U1": 50, "U2": 50})]
    balances = calculate_balances(expenses, ["U1", "U2", "U3"])
    assert balances["U3"] == 0


def test_no_expenses():
    assert calculate_balances([], {"a", "b"}) == {"a": 0, "b": 0}


def test_expense_without_payer_is_skipped():
    expenses = [
        make_expense("e1", None, 100, {"U1": 50, "U2": 50}),
        make_expense("e2", "U2", 30, {"U1": 15, "U2": 15}),
    ]
    assert calculate_balances(expenses, ["U1", "U2"]) == {"U1": -15, "U2": 15}


def test_split_member_outside_member_list_still_counted():
    expenses = [make_expense("e1", "U1", 90, {"U1": 30, "U2": 30, "gone": 30})]
    balances = calculate_balances(expenses, ["U1", "U2"])
    assert balances == {"U1": 60, "U2": -30, "gone": -30}


def test_payer_not_in_own_split():
    expenses = [make_expense("e1", "U1", 40, {"U2": 40}, split_type="custom")]
    assert calculate_balances(expenses, ["U1", "U2"]) == {"U1": 40, "U2": -40}


def room_history():
    members = ["a", "b", "c"]
    expenses = []
    for i, (payer, amount) in enumerate([("a", 100), ("b", 10), ("c", 0.07), ("a", 1234.56), ("b", 19.99)]):
        splits = {s.user_id: s.amount for s in build_equal_splits(amount, members)}
        expenses.append(make_expense(f"e{i}", payer, amount, splits))
    expenses.append(make_expense("e9", "c", 50, {"a": 20.5, "c": 29.5}, split_type="custom"))
    return members, expenses


def test_balances_are_conserved():
    members, expenses = room_history()
    balances = calculate_balances(expenses, members)

    paid = round2(sum(e.amount for e in expenses))
    owed = round2(sum(s.amount for e in expenses for s in e.splits))
    assert paid == owed
    assert sum(balances.values()) == pytest.approx(0, abs=1e-9)


def test_balances_do_not_depend_on_order():
    members, expenses = room_history()
    forward = calculate_balances(expenses, members)
    backward = calculate_balances(list(reversed(expenses)), members)
    shuffled = calculate_balances(expenses[3:] + expenses[:3], members)
    assert forward == backward == shuffled


def test_each_call_is_fresh():
    members, expenses = room_history()
    first = calculate_balances(expenses, members)
    first["a"] = 999
    assert calculate_balances(expenses, members)["a"] != 999
