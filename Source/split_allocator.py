"""
Split Allocator module for SplitEase
Divides an expense total across the members selected at creation time
"""

from decimal import Decimal
from typing import Iterable, List, Sequence

from config import SPLIT_TOLERANCE
from data_models import Allocation, SplitMember
from errors import InvalidInputError, SplitMismatchError
from utils import to_non_negative_decimal


def _selected(members: Iterable[SplitMember]) -> List[SplitMember]:
    return [m for m in members if m.selected]


def equal_split(total, members: Sequence[SplitMember]) -> List[Allocation]:
    """Give every selected member total / count(selected)"""
    total = to_non_negative_decimal(total, "total")
    selected = _selected(members)

    if not selected:
        raise InvalidInputError("Please select at least one member to split with", participant_count=0)

    share = total / Decimal(len(selected))
    return [Allocation(participant=m.participant, amount=share) for m in selected]


def validate_custom_split(total, allocations: Sequence[Allocation],
                          tolerance: Decimal = SPLIT_TOLERANCE) -> List[Allocation]:
    """
    Check that custom amounts add up to the total.

    The tolerance is absolute (currency units), whatever the size of the bill.
    Raises SplitMismatchError carrying the difference otherwise.
    """
    total = to_non_negative_decimal(total, "total")
    allocated = sum((to_non_negative_decimal(a.amount, f"amount for {a.participant.name}")
                     for a in allocations), Decimal("0"))

    if abs(allocated - total) > tolerance:
        raise SplitMismatchError(total=total, allocated=allocated)

    return list(allocations)


def allocate(total, members: Sequence[SplitMember], equal: bool = True) -> List[Allocation]:
    """Build the allocations for a new expense, equally or from manual amounts"""
    if equal:
        return equal_split(total, members)

    selected = _selected(members)
    if not selected:
        raise InvalidInputError("Please select at least one member to split with", participant_count=0)

    allocations = [
        Allocation(participant=m.participant,
                   amount=to_non_negative_decimal(m.amount if m.amount is not None else 0,
                                                  f"amount for {m.participant.name}"))
        for m in selected
    ]
    return validate_custom_split(total, allocations)
