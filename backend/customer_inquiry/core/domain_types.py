"""Domain Types — identity type, field limits and outcome kinds for customer inquiry.

Invariants:
    - CustomerKey wraps int and is only ever produced by validate_customer_key()
    - Key range is 1..99999 (5-digit legacy CUSTNO field)
    - Money fields carry exactly 2 fraction digits, 7 integer digits, signed
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerKey = NewType("CustomerKey", int)   # 1–99999


# ─── Field Limits ────────────────────────────────────────────────

MIN_CUSTOMER_KEY = 1
MAX_CUSTOMER_KEY = 99_999

NAME_MAX_LENGTH = 30
ADDRESS_MAX_LENGTH = 30
CITY_MAX_LENGTH = 20
STATE_LENGTH = 2
PHONE_MAX_LENGTH = 12

MONEY_PRECISION = 9
MONEY_FRACTION_DIGITS = 2
MONEY_SCALE = Decimal("0.01")


# ─── Enums ───────────────────────────────────────────────────────

class OutcomeKind(str, Enum):
    """Terminal classification of one inquiry, used as a log label."""
    SUCCESS = "success"
    VALIDATION_FAILURE = "validation_failure"
    NOT_FOUND = "not_found"
    SYSTEM_ERROR = "system_error"


class StoreBackend(str, Enum):
    """Record store implementations selectable from settings."""
    SQL = "sql"
    MEMORY = "memory"
