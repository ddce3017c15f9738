"""Customer Stores — CustomerStore implementations (SQL and in-memory).

Invariants:
    - lookup() is a single primary-key read: returns one record or None
    - Stores never write, cache, or retry; the system of record owns that
    - Records handed out are frozen snapshots; callers cannot mutate store state

Design Decisions:
    - SqlCustomerStore resolves the session manager lazily: the singleton is set in
      the lifespan, after routes import this module
    - InMemoryCustomerStore is test-only; STORE_BACKEND=memory starts it empty
"""

from collections.abc import Callable, Iterable

from sqlalchemy import select

from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.domain_types import CustomerKey
from customer_inquiry.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from customer_inquiry.models.customer import Customer


class SqlCustomerStore:
    """Keyed read of the custmast table through the async session manager."""

    def __init__(
        self,
        manager: Callable[[], DatabaseSessionManager] = get_db_manager,
    ):
        self._manager = manager

    async def lookup(self, key: CustomerKey) -> CustomerRecord | None:
        async with self._manager().session() as db:
            result = await db.execute(
                select(Customer).where(Customer.customer_number == key),
            )
            row = result.scalar_one_or_none()
            return row.to_record() if row else None


class InMemoryCustomerStore:
    """Dict-backed store keyed by customer number."""

    def __init__(self, records: Iterable[CustomerRecord] = ()):
        self._records: dict[int, CustomerRecord] = {}
        for record in records:
            self.add(record)

    def add(self, record: CustomerRecord) -> None:
        self._records[int(record.customer_number)] = record

    async def lookup(self, key: CustomerKey) -> CustomerRecord | None:
        return self._records.get(int(key))
