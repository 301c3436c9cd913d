"""
Data models for SplitEase - Expense splitting and settlement tracking
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Participant:
    """A group member; identity is the id, name is for display only"""
    id: str
    name: str = field(compare=False)
    email: Optional[str] = field(default=None, compare=False)
    phone: Optional[str] = field(default=None, compare=False)


@dataclass
class SplitMember:
    """A participant as offered in the expense split"""
    participant: Participant
    selected: bool = True
    amount: Optional[Decimal] = None


@dataclass(frozen=True)
class Allocation:
    """Amount allocated to one participant when an expense is created"""
    participant: Participant
    amount: Decimal


class SettlementStatus(str, Enum):
    OWES = "owes"
    RECEIVES = "receives"
    SETTLED = "settled"


@dataclass(frozen=True)
class SettlementResult:
    """Balance of one participant against an equal share of the total"""
    participant: Participant
    pending: Decimal
    status: SettlementStatus


@dataclass(frozen=True)
class AdminPaybackResult:
    """Balance of one participant towards the admin who fronted the bill"""
    participant: Participant
    owes_to_admin: Decimal
    status: SettlementStatus
    is_admin: bool = False


@dataclass
class Payment:
    """A recorded payment towards a shared expense"""
    participant_id: str
    amount: Decimal
    method: str = "cash"
    notes: str = ""


@dataclass(frozen=True)
class SettlementSummary:
    """Headline figures of an expense"""
    total: Decimal
    total_paid: Decimal
    remaining: Decimal
    share: Decimal
    participant_count: int


@dataclass(frozen=True)
class Reminder:
    """Rendered reminder, ready to hand to a sender"""
    participant: Participant
    channel: str
    subject: str
    message: str
