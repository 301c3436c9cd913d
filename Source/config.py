"""
Centralized configuration for SplitEase with environment
"""

import os
from decimal import Decimal

# Thresholds
SETTLEMENT_EPSILON = Decimal(os.getenv("SPLITEASE_SETTLEMENT_EPSILON", "0.01"))
SPLIT_TOLERANCE = Decimal(os.getenv("SPLITEASE_SPLIT_TOLERANCE", "0.01"))

# Reminder text
CURRENCY_SYMBOL = os.getenv("SPLITEASE_CURRENCY_SYMBOL", "₹")
APP_NAME = os.getenv("SPLITEASE_APP_NAME", "SplitEase")

# Runtime settings
EXPORT_DIR = os.getenv("SPLITEASE_EXPORT_DIR", ".")
DEFAULT_PAYMENT_METHOD = os.getenv("SPLITEASE_DEFAULT_PAYMENT_METHOD", "cash")
