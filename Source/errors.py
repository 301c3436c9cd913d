"""
Error types for SplitEase
"""

from decimal import Decimal
from typing import Optional


class SplitEaseError(Exception):
    """Base class for all SplitEase errors"""


class InvalidInputError(SplitEaseError):
    """Input that no calculation can be made from (e.g. zero participants)"""

    def __init__(self, message: str, participant_count: Optional[int] = None):
        super().__init__(message)
        self.participant_count = participant_count


class SplitMismatchError(SplitEaseError):
    """Custom split amounts do not add up to the expense total"""

    def __init__(self, total: Decimal, allocated: Decimal):
        self.total = total
        self.allocated = allocated
        self.difference = allocated - total
        super().__init__(
            f"Split amounts ({allocated}) must equal the total expense amount ({total}), "
            f"difference {self.abs_difference:.2f}"
        )

    @property
    def abs_difference(self) -> Decimal:
        return abs(self.difference)
