"""Inquiry Outcome — tagged union of the four terminal classifications of a request.

Invariants:
    - Exactly one variant per request; variants are mutually exclusive and exhaustive
    - Variants are frozen; rendering never mutates outcome state
    - SystemFailure.cause is opaque: kept for logging, never rendered

Design Decisions:
    - Union of frozen dataclasses over exception subclasses: callers `match` on the
      variant instead of relying on except-clause ordering
    - LookupResult (Found | Absent | Fault) separates "what the store said" from
      "what the request means", so classify() stays a pure function
"""

from dataclasses import dataclass, field

from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.domain_types import CustomerKey, OutcomeKind


# ─── Outcome variants ────────────────────────────────────────────

@dataclass(frozen=True)
class Success:
    record: CustomerRecord
    kind: OutcomeKind = field(default=OutcomeKind.SUCCESS, init=False)


@dataclass(frozen=True)
class ValidationFailure:
    reason: str
    kind: OutcomeKind = field(default=OutcomeKind.VALIDATION_FAILURE, init=False)


@dataclass(frozen=True)
class NotFound:
    key: CustomerKey
    kind: OutcomeKind = field(default=OutcomeKind.NOT_FOUND, init=False)


@dataclass(frozen=True)
class SystemFailure:
    cause: BaseException | None = field(default=None, compare=False, repr=False)
    kind: OutcomeKind = field(default=OutcomeKind.SYSTEM_ERROR, init=False)


InquiryOutcome = Success | ValidationFailure | NotFound | SystemFailure


# ─── Store lookup results ────────────────────────────────────────

@dataclass(frozen=True)
class Found:
    record: CustomerRecord


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Fault:
    cause: BaseException = field(compare=False)


LookupResult = Found | Absent | Fault
