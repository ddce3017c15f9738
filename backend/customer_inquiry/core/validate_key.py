"""Key Validation — structural and range checks on a raw customer identifier.

Invariants:
    - PURE: no IO, no logging, deterministic for a given input
    - Returns CustomerKey on success, ValidationFailure otherwise; never raises
    - Check order: absent → numeric → zero → negative → maximum

Design Decisions:
    - Zero keeps the legacy "not supplied" meaning and shares the required message;
      negative keys get their own message (ADR: canonical validation policy, see DESIGN.md)
    - Accepts int, integral Decimal/float and digit strings: path parameters arrive
      as text, JSON bodies as numbers
"""

from decimal import Decimal, InvalidOperation

from customer_inquiry.core.domain_types import (
    CustomerKey, MAX_CUSTOMER_KEY, MIN_CUSTOMER_KEY,
)
from customer_inquiry.core.errors import (
    IDENTIFIER_NOT_NUMERIC, IDENTIFIER_NOT_POSITIVE,
    IDENTIFIER_REQUIRED, IDENTIFIER_TOO_LARGE,
)
from customer_inquiry.core.outcome import ValidationFailure

_MAX_KEY_DIGITS = len(str(MAX_CUSTOMER_KEY))
_OUT_OF_RANGE = MAX_CUSTOMER_KEY + 1


def validate_customer_key(raw: object) -> CustomerKey | ValidationFailure:
    """Validate a caller-supplied identifier before any lookup is attempted."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return ValidationFailure(IDENTIFIER_REQUIRED)

    value = _to_int(raw)
    if value is None:
        return ValidationFailure(IDENTIFIER_NOT_NUMERIC)
    if value == 0:
        return ValidationFailure(IDENTIFIER_REQUIRED)
    if value < MIN_CUSTOMER_KEY:
        return ValidationFailure(IDENTIFIER_NOT_POSITIVE)
    if value > MAX_CUSTOMER_KEY:
        return ValidationFailure(IDENTIFIER_TOO_LARGE)
    return CustomerKey(value)


def _to_int(raw: object) -> int | None:
    """Integral value of raw, or None when raw is not a whole number."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        # int() would accept "1_000" and non-ASCII digits
        digits = raw[1:] if raw[:1] in "+-" else raw
        if not (digits.isascii() and digits.isdigit()):
            return None
        # int() refuses strings beyond sys.get_int_max_str_digits()
        significant = digits.lstrip("0") or "0"
        value = (
            _OUT_OF_RANGE if len(significant) > _MAX_KEY_DIGITS
            else int(significant)
        )
        return -value if raw[0] == "-" else value
    if isinstance(raw, (float, Decimal)):
        try:
            as_decimal = Decimal(raw)
        except (InvalidOperation, ValueError):
            return None
        if not as_decimal.is_finite() or as_decimal != as_decimal.to_integral_value():
            return None
        return int(as_decimal)
    return None
