"""Inquiry Service — verifies the validate → lookup → classify pipeline against store doubles.

Invariants:
    - Invalid keys never reach the store (call count stays 0)
    - Store exceptions and timeouts become SystemFailure; nothing propagates
    - Sync stores are supported through a worker thread
    - Same key + same store state → identical outcome and payload

Design Decisions:
    - CountingStore over unittest.mock: call counts and faults are explicit in the double
"""

import asyncio
import json
import logging

import pytest

from customer_inquiry.core.domain_types import CustomerKey
from customer_inquiry.core.errors import StoreError, StoreTimeoutError
from customer_inquiry.core.outcome import (
    NotFound, Success, SystemFailure, ValidationFailure,
)
from customer_inquiry.core.render import render
from customer_inquiry.infrastructure.observability import request_logger
from customer_inquiry.services.inquiry_service import (
    InquiryContext, InquiryService,
)
from tests.builders import CountingStore, SyncCountingStore, make_record


# ─── validation short-circuit ────────────────────────────────────

@pytest.mark.parametrize("raw", [None, 0, -1, -99999, "", "abc", 100_000])
async def test_invalid_key_never_calls_store(raw):
    store = CountingStore(make_record(1))
    outcome = await InquiryService(store).inquire(raw)
    assert isinstance(outcome, ValidationFailure)
    assert store.call_count == 0


# ─── success / not found ─────────────────────────────────────────

@pytest.mark.parametrize("key", [1, 99999])
async def test_boundary_keys_round_trip_exactly(key):
    record = make_record(key)
    store = CountingStore(record)
    outcome = await InquiryService(store).inquire(key)
    assert outcome == Success(record)
    assert store.calls == [key]
    assert render(outcome).payload["balance"] == "1500.75"


async def test_missing_record_is_not_found():
    store = CountingStore(make_record(12345))
    outcome = await InquiryService(store).inquire(99999)
    assert outcome == NotFound(CustomerKey(99999))
    assert store.call_count == 1


async def test_string_key_is_looked_up_as_int():
    store = CountingStore(make_record(42))
    outcome = await InquiryService(store).inquire("42")
    assert isinstance(outcome, Success)
    assert store.calls == [42]


async def test_sync_store_runs_off_loop():
    record = make_record(7)
    store = SyncCountingStore(record)
    outcome = await InquiryService(store).inquire(7)
    assert outcome == Success(record)
    assert store.calls == [7]


# ─── faults ──────────────────────────────────────────────────────

async def test_store_exception_becomes_system_failure():
    fault = StoreError("Connection or operational error", "execute")
    store = CountingStore(fault=fault)
    outcome = await InquiryService(store).inquire(12345)
    assert isinstance(outcome, SystemFailure)
    assert outcome.cause is fault


async def test_store_fault_message_never_reaches_payload():
    store = CountingStore(fault=RuntimeError("relation custmast does not exist"))
    outcome = await InquiryService(store).inquire(12345)
    rendered = render(outcome)
    assert rendered.status_code == 500
    assert "custmast" not in json.dumps(rendered.payload)


async def test_slow_store_times_out_as_system_failure():
    store = CountingStore(make_record(1), delay=1.0)
    outcome = await InquiryService(store, timeout_seconds=0.05).inquire(1)
    assert isinstance(outcome, SystemFailure)
    assert isinstance(outcome.cause, StoreTimeoutError)


async def test_non_record_from_store_is_system_failure():
    class _BadStore:
        async def lookup(self, key):
            return {"customerNumber": key}

    outcome = await InquiryService(_BadStore()).inquire(5)
    assert isinstance(outcome, SystemFailure)


async def test_cancellation_propagates():
    store = CountingStore(make_record(1), delay=10.0)
    task = asyncio.create_task(InquiryService(store).inquire(1))
    await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


def test_non_positive_timeout_is_rejected():
    with pytest.raises(ValueError):
        InquiryService(CountingStore(), timeout_seconds=0)


# ─── idempotence & concurrency ───────────────────────────────────

async def test_repeated_lookup_renders_identical_bytes():
    service = InquiryService(CountingStore(make_record(12345)))
    first = render(await service.inquire(12345))
    second = render(await service.inquire(12345))
    assert json.dumps(first.payload) == json.dumps(second.payload)
    assert first.status_code == second.status_code


async def test_concurrent_inquiries_do_not_interfere():
    store = CountingStore(make_record(1), make_record(2), delay=0.01)
    service = InquiryService(store)
    outcomes = await asyncio.gather(
        service.inquire(1), service.inquire(2), service.inquire(3), service.inquire(0),
    )
    assert [o.kind.value for o in outcomes] == [
        "success", "success", "not_found", "validation_failure",
    ]
    assert sorted(store.calls) == [1, 2, 3]


# ─── logging context ─────────────────────────────────────────────

async def test_logs_carry_request_id_from_context(caplog):
    ctx = InquiryContext(
        request_id="req-123", log=request_logger("test.inquiry", "req-123"),
    )
    with caplog.at_level(logging.INFO, logger="test.inquiry"):
        await InquiryService(CountingStore()).inquire(99999, ctx)
    record = caplog.records[-1]
    assert record.request_id == "req-123"
    assert record.outcome == "not_found"
    assert record.customer_number == 99999


async def test_fault_is_logged_with_traceback(caplog):
    store = CountingStore(fault=RuntimeError("boom"))
    with caplog.at_level(logging.ERROR):
        await InquiryService(store).inquire(1)
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].exc_info is not None
