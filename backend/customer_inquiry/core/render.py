"""Response Rendering — maps an InquiryOutcome to (payload, status code).

Invariants:
    - PURE and referentially transparent: same outcome → same payload
    - Success payload is the flattened record; None fields are omitted, not null
    - Money fields render as strings with exactly 2 fraction digits ("0.00", "-20.00")
    - SystemFailure never renders its cause

Design Decisions:
    - Money as JSON strings: exact decimal text survives any JSON encoder, whereas
      numbers are routed through float by most clients (ADR: ledger amounts)
    - Keys are camelCase to match the legacy display-file field names used by the UI
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.errors import (
    CUSTOMER_NOT_FOUND, UNEXPECTED_ERROR, ErrorCode, error_payload,
)
from customer_inquiry.core.domain_types import MONEY_SCALE
from customer_inquiry.core.outcome import (
    InquiryOutcome, NotFound, Success, SystemFailure, ValidationFailure,
)


@dataclass(frozen=True)
class RenderedResponse:
    payload: dict
    status_code: int


def render(outcome: InquiryOutcome) -> RenderedResponse:
    """Render the outcome into the external response contract."""
    match outcome:
        case Success(record=record):
            return RenderedResponse(render_record(record), 200)
        case ValidationFailure(reason=reason):
            return RenderedResponse(
                error_payload(ErrorCode.VALIDATION_ERROR, reason), 400,
            )
        case NotFound():
            return RenderedResponse(
                error_payload(ErrorCode.NOT_FOUND, CUSTOMER_NOT_FOUND), 404,
            )
        case SystemFailure():
            return RenderedResponse(
                error_payload(ErrorCode.INTERNAL_ERROR, UNEXPECTED_ERROR), 500,
            )
    raise TypeError(f"not an InquiryOutcome: {type(outcome).__name__}")


def render_record(record: CustomerRecord) -> dict:
    """Flatten a record into its camelCase payload, dropping absent fields."""
    fields = {
        "customerNumber": int(record.customer_number),
        "customerName": record.customer_name,
        "address1": record.address1,
        "city": record.city,
        "state": record.state,
        "zipCode": record.zip_code,
        "phone": record.phone,
        "balance": _format_money(record.balance),
        "creditLimit": _format_money(record.credit_limit),
        "lastOrderDate": _format_date(record.last_order_date),
    }
    return {key: value for key, value in fields.items() if value is not None}


def _format_money(amount: Decimal | None) -> str | None:
    if amount is None:
        return None
    # "-0.00" would leak the sign of a negative zero
    quantized = amount.quantize(MONEY_SCALE, rounding=ROUND_HALF_UP)
    if quantized.is_zero():
        quantized = abs(quantized)
    return f"{quantized:f}"


def _format_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None
