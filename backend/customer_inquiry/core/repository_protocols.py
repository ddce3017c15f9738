"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The record store is a single-key read: at most one record per key, no scans
    - None means "absent"; any raised exception means "fault"

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Two protocols: async stores are awaited directly, sync stores are run in a
      worker thread by the service (ADR: store may be synchronous or awaitable)
"""

from typing import Protocol

from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.domain_types import CustomerKey


class CustomerStore(Protocol):
    """Contract for an awaitable keyed customer read, implemented by shell."""
    async def lookup(self, key: CustomerKey) -> CustomerRecord | None: ...


class SyncCustomerStore(Protocol):
    """Contract for a blocking keyed customer read, implemented by shell."""
    def lookup(self, key: CustomerKey) -> CustomerRecord | None: ...
