"""
Payment ledger module for SplitEase
Loads members and recorded payments and sums them per participant
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from config import DEFAULT_PAYMENT_METHOD
from constants import (MEMBER_COLUMNS, MEMBER_OPTIONAL_COLUMNS, PAYMENT_COLUMNS,
                       PAYMENT_OPTIONAL_COLUMNS)
from data_models import Participant, Payment
from errors import InvalidInputError
from utils import to_non_negative_decimal


def aggregate_contributions(participants: Sequence[Participant],
                            payments: Iterable[Payment]) -> Dict[Participant, Decimal]:
    """
    Sum payments per participant.

    Every tracked participant starts at 0 so non-payers still count towards
    the share. Order follows `participants`.
    """
    contributions: Dict[Participant, Decimal] = {p: Decimal("0") for p in participants}
    by_id = {p.id: p for p in participants}

    if len(by_id) != len(participants):
        raise InvalidInputError("Participant ids must be unique", participant_count=len(participants))

    for payment in payments:
        participant = by_id.get(payment.participant_id)
        if participant is None:
            raise InvalidInputError(f"Payment recorded for unknown participant: {payment.participant_id}")
        contributions[participant] += to_non_negative_decimal(payment.amount, f"payment by {participant.name}")

    return contributions


def _read_csv(path: str, required: List[str], optional: List[str]) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise InvalidInputError(f"{path}: file is empty")
    except pd.errors.ParserError as e:
        raise InvalidInputError(f"{path}: could not parse CSV ({e})")

    df.columns = [c.strip().lower() for c in df.columns]

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InvalidInputError(f"{path}: missing columns {missing}")

    for column in optional:
        if column not in df.columns:
            df[column] = ""

    return df[required + optional].apply(lambda col: col.str.strip())


def load_members_csv(path: str) -> List[Participant]:
    """Read members from a CSV file with id,name[,email,phone]"""
    df = _read_csv(path, MEMBER_COLUMNS, MEMBER_OPTIONAL_COLUMNS)

    return [
        Participant(
            id=row.id,
            name=row.name or row.id,
            email=row.email or None,
            phone=row.phone or None,
        )
        for row in df.itertuples(index=False)
    ]


def load_payments_csv(path: str) -> List[Payment]:
    """Read payments from a CSV file with participant_id,amount[,method,notes]"""
    df = _read_csv(path, PAYMENT_COLUMNS, PAYMENT_OPTIONAL_COLUMNS)

    payments = []
    for line, row in enumerate(df.itertuples(index=False), start=2):
        payments.append(Payment(
            participant_id=row.participant_id,
            amount=to_non_negative_decimal(row.amount, f"amount on line {line}"),
            method=row.method or DEFAULT_PAYMENT_METHOD,
            notes=row.notes,
        ))
    return payments


def contributions_frame(contributions: Dict[Participant, Decimal]) -> pd.DataFrame:
    """Tabular view of the contributions, one row per participant"""
    return pd.DataFrame(
        [{'participant_id': p.id, 'name': p.name, 'paid': amount} for p, amount in contributions.items()],
        columns=['participant_id', 'name', 'paid'],
    )
