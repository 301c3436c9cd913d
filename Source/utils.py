#!/usr/bin/env python3
"""
Utility functions for SplitEase
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pathlib import Path
from typing import Optional

from config import CURRENCY_SYMBOL
from constants import DECIMAL_QUANTIZE
from errors import InvalidInputError


def to_decimal(value, field_name: str = "amount") -> Decimal:
    """Convert int/float/str/Decimal to Decimal without float artifacts"""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a number, got {value!r}")
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(f"{field_name} is not a valid number: {value!r}")
    else:
        raise InvalidInputError(f"{field_name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInputError(f"{field_name} must be finite, got {value!r}")
    return result


def to_non_negative_decimal(value, field_name: str = "amount") -> Decimal:
    """Same as to_decimal, rejecting negative amounts"""
    result = to_decimal(value, field_name)
    if result < 0:
        raise InvalidInputError(f"{field_name} cannot be negative, got {result}")
    return result


def quantize_amount(amount: Decimal) -> Decimal:
    return amount.quantize(DECIMAL_QUANTIZE, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Two decimals, symbol in front"""
    return f"{symbol}{quantize_amount(amount)}"


def try_parse_decimal(value: str) -> Optional[Decimal]:
    """Safely parse a decimal amount from user input"""
    if not isinstance(value, str):
        return None
    try:
        return to_decimal(value.strip().replace(',', '.'))
    except InvalidInputError:
        return None


def validate_menu_choice(choice: str, valid_choices: list[str]) -> Optional[str]:
    """Validate a menu choice against allowed options"""
    if not isinstance(choice, str):
        return None
    choice = choice.strip()
    return choice if choice in set(valid_choices) else None


def sanitize_filename(filename: str) -> str:
    """Sanitize filename for safe file operations"""
    if not isinstance(filename, str):
        return "unnamed_file"

    filename = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', filename)
    filename = filename.replace(' ', '_')

    if len(filename) > 200:
        filename = filename[:200]

    if not filename.strip():
        filename = "unnamed_file"

    return filename


def ensure_directory_exists(directory: str) -> Path:
    """Ensure a directory exists, create it if it doesn't"""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path
