"""Inquiry Service — runs validate → lookup → classify for one request.

Invariants:
    - The store is never called for a key that failed validation
    - Every store exception (and the timeout) becomes a Fault → SystemFailure; nothing escapes
    - asyncio.CancelledError is not caught: a cancelled request abandons the read
    - No state is kept between calls; one service instance is safe for concurrent requests

Design Decisions:
    - Logging context is passed per call (InquiryContext), not read from a global
    - Sync stores run via asyncio.to_thread so a blocking driver never stalls the loop
      (ADR: store may be synchronous or awaitable)
    - asyncio.wait_for bounds the lookup; the default 5s matches the legacy
      read-only transaction timeout
"""

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field

from customer_inquiry.core.classify import classify
from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.domain_types import CustomerKey
from customer_inquiry.core.errors import ErrorContext, StoreTimeoutError
from customer_inquiry.core.outcome import (
    Absent, Fault, Found, InquiryOutcome, LookupResult, ValidationFailure,
)
from customer_inquiry.core.repository_protocols import (
    CustomerStore, SyncCustomerStore,
)
from customer_inquiry.core.validate_key import validate_customer_key
from customer_inquiry.infrastructure.observability import request_logger

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class InquiryContext:
    """Per-request observability context handed to the service by the caller."""
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    log: logging.LoggerAdapter | None = None

    @property
    def logger(self) -> logging.LoggerAdapter:
        return self.log or request_logger(__name__, self.request_id)


class InquiryService:
    """Customer inquiry pipeline bound to one record store."""

    def __init__(
        self,
        store: CustomerStore | SyncCustomerStore,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._store = store
        self._timeout = timeout_seconds

    async def inquire(
        self, raw_key: object, context: InquiryContext | None = None,
    ) -> InquiryOutcome:
        """Classify one inquiry. Never raises for validation, absence or store faults."""
        context = context or InquiryContext()
        log = context.logger

        validation = validate_customer_key(raw_key)
        lookup: LookupResult | None = None
        if isinstance(validation, ValidationFailure):
            log.info(
                f"Inquiry rejected: {validation.reason}",
                extra={"outcome": validation.kind.value},
            )
        else:
            lookup = await self._lookup(validation, context)

        outcome = classify(validation, lookup)
        if lookup is not None:
            log.info(
                f"Inquiry completed: {outcome.kind.value}",
                extra={
                    "outcome": outcome.kind.value,
                    "customer_number": int(validation),
                },
            )
        return outcome

    async def _lookup(
        self, key: CustomerKey, context: InquiryContext,
    ) -> LookupResult:
        """Single bounded store read; faults are returned, not raised."""
        log = context.logger
        try:
            record = await asyncio.wait_for(
                self._read(key), timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            cause = StoreTimeoutError(
                self._timeout,
                ErrorContext(
                    request_id=context.request_id,
                    customer_number=int(key),
                    operation="lookup",
                ),
            )
            log.error(
                f"Customer store timed out after {self._timeout}s",
                extra={"customer_number": int(key), "error_code": cause.code.value},
            )
            return Fault(cause)
        except Exception as e:
            log.error(
                f"Customer store lookup failed: {e}",
                exc_info=True,
                extra={"customer_number": int(key)},
            )
            return Fault(e)

        if record is None:
            return Absent()
        if not isinstance(record, CustomerRecord):
            log.error(
                f"Customer store returned {type(record).__name__}, "
                f"expected CustomerRecord",
                extra={"customer_number": int(key)},
            )
            return Fault(TypeError("store returned a non-record value"))
        return Found(record)

    async def _read(self, key: CustomerKey) -> CustomerRecord | None:
        if inspect.iscoroutinefunction(self._store.lookup):
            return await self._store.lookup(key)
        return await asyncio.to_thread(self._store.lookup, key)
