"""Outcome Classification — folds validation and lookup results into one InquiryOutcome.

Invariants:
    - PURE: no IO, no async, no side effects
    - A ValidationFailure short-circuits; lookup must be None in that case
    - Exactly one outcome variant is constructed per call
"""

from customer_inquiry.core.domain_types import CustomerKey
from customer_inquiry.core.outcome import (
    Absent, Fault, Found, InquiryOutcome, LookupResult,
    NotFound, Success, SystemFailure, ValidationFailure,
)


def classify(
    validation: CustomerKey | ValidationFailure,
    lookup: LookupResult | None,
) -> InquiryOutcome:
    """Map (validation, lookup) onto the terminal outcome of the request."""
    if isinstance(validation, ValidationFailure):
        return validation
    match lookup:
        case Found(record=record):
            return Success(record)
        case Absent():
            return NotFound(validation)
        case Fault(cause=cause):
            return SystemFailure(cause)
    # Valid key with no lookup performed is a programming error in the shell
    return SystemFailure(
        RuntimeError(f"no lookup result for key {validation}"),
    )
