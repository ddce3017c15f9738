"""Customer Record — read-only snapshot of one customer master row.

Invariants:
    - Frozen: the core never mutates a record after the store produced it
    - balance / credit_limit are decimal.Decimal, never float
    - Text fields may be None when the stored column is empty

Design Decisions:
    - Plain frozen dataclass over ORM entity: core stays free of persistence imports
      (ADR: functional core, imperative shell)
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from customer_inquiry.core.domain_types import CustomerKey


@dataclass(frozen=True)
class CustomerRecord:
    customer_number: CustomerKey
    customer_name: str | None = None
    address1: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: int | str | None = None
    phone: str | None = None
    balance: Decimal | None = None
    credit_limit: Decimal | None = None
    last_order_date: date | None = None

    def __post_init__(self):
        for name in ("balance", "credit_limit"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Decimal):
                raise TypeError(
                    f"{name} must be Decimal, got {type(value).__name__}",
                )
