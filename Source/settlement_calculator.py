"""
Settlement Calculator module for SplitEase
Classifies each participant's payments against an equal share of the total
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Mapping

from config import SETTLEMENT_EPSILON
from data_models import (AdminPaybackResult, Participant, SettlementResult,
                         SettlementStatus, SettlementSummary)
from errors import InvalidInputError
from utils import to_non_negative_decimal


def classify(remaining: Decimal, epsilon: Decimal = SETTLEMENT_EPSILON) -> SettlementStatus:
    """remaining = share - paid; anything within +/- epsilon counts as settled"""
    if remaining > epsilon:
        return SettlementStatus.OWES
    if remaining < -epsilon:
        return SettlementStatus.RECEIVES
    return SettlementStatus.SETTLED


def _prepare(total, contributions: Mapping[Participant, object]):
    """Validate inputs, return (total, share, contributions as Decimals)"""
    total = to_non_negative_decimal(total, "total")

    paid: Dict[Participant, Decimal] = {
        participant: to_non_negative_decimal(amount, f"contribution of {participant.name}")
        for participant, amount in contributions.items()
    }

    if not paid:
        raise InvalidInputError("Cannot split an expense between zero participants", participant_count=0)

    share = total / Decimal(len(paid))
    return total, share, paid


def calculate_pending(total, contributions: Mapping[Participant, object]) -> List[SettlementResult]:
    """
    Compute what every participant still owes or gets back.

    Participants are the keys of `contributions`; members who have not paid
    anything must be present with 0 or they are left out of the share.
    Results follow the mapping's order.
    """
    _, share, paid = _prepare(total, contributions)

    results = []
    for participant, amount in paid.items():
        remaining = share - amount
        results.append(SettlementResult(
            participant=participant,
            pending=abs(remaining),
            status=classify(remaining),
        ))

    return results


def calculate_admin_payback(total, admin: Participant,
                            contributions: Mapping[Participant, object]) -> List[AdminPaybackResult]:
    """
    Same balances, framed as money owed to the admin who fronted the bill.

    The admin counts in the share denominator. Their own row is always
    reported as settled with nothing owed: a convention, not a computed fact.
    """
    _, share, paid = _prepare(total, contributions)

    if admin not in paid:
        raise InvalidInputError(
            f"Admin {admin.name} is not one of the participants",
            participant_count=len(paid),
        )

    results = []
    for participant, amount in paid.items():
        if participant == admin:
            results.append(AdminPaybackResult(
                participant=participant,
                owes_to_admin=Decimal("0"),
                status=SettlementStatus.SETTLED,
                is_admin=True,
            ))
            continue

        owes_to_admin = share - amount
        results.append(AdminPaybackResult(
            participant=participant,
            owes_to_admin=abs(owes_to_admin),
            status=classify(owes_to_admin),
        ))

    return results


def summarize(total, contributions: Mapping[Participant, object]) -> SettlementSummary:
    """Total bill, paid so far, still outstanding and the per-head share"""
    total, share, paid = _prepare(total, contributions)
    total_paid = sum(paid.values(), Decimal("0"))

    return SettlementSummary(
        total=total,
        total_paid=total_paid,
        remaining=total - total_paid,
        share=share,
        participant_count=len(paid),
    )


def members_who_owe(results: Iterable[SettlementResult]) -> List[SettlementResult]:
    return [r for r in results if r.status is SettlementStatus.OWES]
