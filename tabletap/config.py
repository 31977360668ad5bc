"""Runtime configuration defaults for pricing, limits and logging."""

from __future__ import annotations

import os
from decimal import Decimal

TAX_RATE = Decimal("0.08")
DELIVERY_FEE = Decimal("5.99")

# Stepper bounds used by the item detail and reservation screens.
MIN_QUANTITY = 1
MAX_QUANTITY = 10
MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 20
DEFAULT_PARTY_SIZE = 2

# Simulated network round trips.
PAYMENT_DELAY_SECONDS = 2.0
RESERVATION_DELAY_SECONDS = 1.5

PICKUP_TIME_STEP_MINUTES = 15
RESERVATION_TIME_STEP_MINUTES = 30

# Dining room size shown on the owner table screen.
TABLE_COUNT = 12

DEBUG_LOG_PATH = os.environ.get("TABLETAP_DEBUG_LOG", "/tmp/tabletap-debug.log")
LOG_LEVEL = os.environ.get("TABLETAP_LOG_LEVEL", "INFO").upper()
SESSION_ROLE = os.environ.get("TABLETAP_ROLE", "customer").strip().lower()
