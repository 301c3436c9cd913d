from decimal import Decimal

import pytest

from data_models import Participant, SettlementStatus
from errors import InvalidInputError
from settlement_calculator import (calculate_admin_payback, calculate_pending,
                                   classify, members_who_owe, summarize)


@pytest.mark.parametrize("remaining, expected", [
    (Decimal("0.01"), SettlementStatus.SETTLED),
    (Decimal("-0.01"), SettlementStatus.SETTLED),
    (Decimal("0.0"), SettlementStatus.SETTLED),
    (Decimal("0.011"), SettlementStatus.OWES),
    (Decimal("-0.011"), SettlementStatus.RECEIVES),
    (Decimal("250"), SettlementStatus.OWES),
    (Decimal("-250"), SettlementStatus.RECEIVES),
])
def test_classify_thresholds(remaining, expected):
    assert classify(remaining) is expected


def test_everyone_paid_their_share(trio):
    results = calculate_pending(300, {p: 100 for p in trio})

    assert [r.participant for r in results] == trio
    assert all(r.status is SettlementStatus.SETTLED for r in results)
    assert all(r.pending == 0 for r in results)


def test_one_member_has_not_paid(trio):
    alice, bob, carol = trio
    results = calculate_pending(300, {alice: 0, bob: 150, carol: 150})

    by_name = {r.participant.name: r for r in results}
    assert by_name["Alice"].status is SettlementStatus.OWES
    assert by_name["Alice"].pending == Decimal("100.00")
    for name in ("Bob", "Carol"):
        assert by_name[name].status is SettlementStatus.RECEIVES
        assert by_name[name].pending == Decimal("50.00")


def test_zero_participants():
    with pytest.raises(InvalidInputError) as exc:
        calculate_pending(100, {})

    assert exc.value.participant_count == 0


def test_settled_keeps_rounding_residue(alice, bob):
    results = calculate_pending(Decimal("100.01"), {alice: Decimal("50"), bob: Decimal("50.01")})

    assert all(r.status is SettlementStatus.SETTLED for r in results)
    assert results[0].pending == Decimal("0.005")


def test_boundary_at_one_cent(alice, bob):
    results = calculate_pending(100, {alice: Decimal("49.99"), bob: Decimal("50.011")})

    assert results[0].status is SettlementStatus.SETTLED
    assert results[1].status is SettlementStatus.RECEIVES


def test_results_follow_input_order(trio):
    alice, bob, carol = trio
    contributions = {carol: 10, alice: 20, bob: 30}

    results = calculate_pending(60, contributions)

    assert [r.participant for r in results] == [carol, alice, bob]


def test_same_inputs_same_output(trio):
    contributions = {p: amount for p, amount in zip(trio, (0, 45.5, 200))}

    assert calculate_pending(245.5, contributions) == calculate_pending(245.5, contributions)


def test_input_mapping_not_modified(trio):
    contributions = {p: 10 for p in trio}
    calculate_pending(90, contributions)

    assert contributions == {p: 10 for p in trio}


def test_shared_display_name_does_not_merge():
    first = Participant(id="a1", name="Sam")
    second = Participant(id="a2", name="Sam")

    results = calculate_pending(100, {first: 100, second: 0})

    assert len(results) == 2
    assert results[0].status is SettlementStatus.RECEIVES
    assert results[1].status is SettlementStatus.OWES


@pytest.mark.parametrize("total, amounts", [
    (Decimal("100"), (0, 0, 0)),
    (Decimal("1000"), (10, 250.75, 0, 333.33, 1000)),
    (Decimal("0.07"), (0.01, 0.02)),
    (Decimal("0"), (5, 0)),
])
def test_balances_add_up(total, amounts):
    participants = [Participant(id=str(i), name=f"P{i}") for i in range(len(amounts))]
    contributions = dict(zip(participants, amounts))

    results = calculate_pending(total, contributions)
    summary = summarize(total, contributions)

    share = total / len(amounts)
    assert abs(share * len(amounts) - total) <= Decimal("0.000001")

    signed = sum(
        (-r.pending if r.status is SettlementStatus.OWES else r.pending)
        for r in results if r.status is not SettlementStatus.SETTLED
    )
    settled = sum(
        Decimal(str(c)) - share
        for r, c in zip(results, amounts) if r.status is SettlementStatus.SETTLED
    )
    assert abs(signed + settled - (summary.total_paid - total)) <= Decimal("0.000001")


def test_rejects_negative_contribution(alice):
    with pytest.raises(InvalidInputError):
        calculate_pending(10, {alice: -1})


def test_admin_always_settled(trio):
    alice, bob, carol = trio

    for admin_paid in (0, 100, 300, 1000):
        results = calculate_admin_payback(300, alice, {alice: admin_paid, bob: 0, carol: 100})

        admin_row = results[0]
        assert admin_row.is_admin
        assert admin_row.status is SettlementStatus.SETTLED
        assert admin_row.owes_to_admin == 0


def test_admin_payback_balances(trio):
    alice, bob, carol = trio

    results = calculate_admin_payback(300, alice, {alice: 300, bob: 0, carol: 150})

    assert results[1].status is SettlementStatus.OWES
    assert results[1].owes_to_admin == Decimal("100")
    assert results[2].status is SettlementStatus.RECEIVES
    assert results[2].owes_to_admin == Decimal("50")
    assert not results[1].is_admin


def test_admin_counts_in_denominator(alice, bob):
    results = calculate_admin_payback(100, alice, {alice: 100, bob: 50})

    assert results[1].status is SettlementStatus.SETTLED


def test_admin_must_be_a_participant(alice, bob, carol):
    with pytest.raises(InvalidInputError):
        calculate_admin_payback(100, carol, {alice: 0, bob: 0})


def test_admin_payback_zero_participants(alice):
    with pytest.raises(InvalidInputError):
        calculate_admin_payback(100, alice, {})


def test_summarize(trio):
    alice, bob, carol = trio

    summary = summarize(300, {alice: 0, bob: 150, carol: 100})

    assert summary.total == Decimal("300")
    assert summary.total_paid == Decimal("250")
    assert summary.remaining == Decimal("50")
    assert summary.share == Decimal("100")
    assert summary.participant_count == 3


def test_members_who_owe(trio):
    alice, bob, carol = trio
    results = calculate_pending(300, {alice: 0, bob: 150, carol: 150})

    assert [r.participant for r in members_who_owe(results)] == [alice]
