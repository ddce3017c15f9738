"""Response Rendering — tests for the outcome → (payload, status) mapping.

Tests cover:
    - status codes 200 / 400 / 404 / 500
    - error envelopes have exactly `message` and `error`
    - money keeps sign and scale 2; absent fields are omitted
    - SystemFailure never renders its cause
    - rendering is referentially transparent
"""

import json
from datetime import date
from decimal import Decimal

import pytest

from customer_inquiry.core.domain_types import CustomerKey
from customer_inquiry.core.outcome import (
    NotFound, Success, SystemFailure, ValidationFailure,
)
from customer_inquiry.core.render import render, render_record
from tests.builders import make_record


# ─── success ─────────────────────────────────────────────────────

def test_success_renders_flattened_record(acme_record):
    rendered = render(Success(acme_record))
    assert rendered.status_code == 200
    assert rendered.payload == {
        "customerNumber": 12345,
        "customerName": "ACME Corporation",
        "address1": "123 Industrial Way",
        "city": "Springfield",
        "state": "IL",
        "zipCode": 62701,
        "phone": "217-555-0100",
        "balance": "1500.75",
        "creditLimit": "5000.00",
        "lastOrderDate": "2024-01-15",
    }


def test_absent_optional_fields_are_omitted_not_null():
    record = make_record(
        1, last_order_date=None, phone=None, address1=None, credit_limit=None,
    )
    payload = render_record(record)
    for key in ("lastOrderDate", "phone", "address1", "creditLimit"):
        assert key not in payload
    assert None not in payload.values()


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("1234.56"), "1234.56"),
        (Decimal("1234.5600"), "1234.56"),
        (Decimal("1234.5"), "1234.50"),
        (Decimal("0"), "0.00"),
        (Decimal("-0.00"), "0.00"),
        (Decimal("-250.10"), "-250.10"),
        (Decimal("9999999.99"), "9999999.99"),
        (Decimal("-9999999.99"), "-9999999.99"),
    ],
)
def test_balance_renders_with_scale_two(amount, expected):
    assert render_record(make_record(1, balance=amount))["balance"] == expected


def test_string_zip_code_passes_through():
    payload = render_record(make_record(1, zip_code="02134"))
    assert payload["zipCode"] == "02134"


def test_date_renders_iso():
    payload = render_record(make_record(1, last_order_date=date(2023, 12, 31)))
    assert payload["lastOrderDate"] == "2023-12-31"


# ─── failures ────────────────────────────────────────────────────

def test_validation_failure_renders_400_with_reason():
    rendered = render(ValidationFailure("identifier required"))
    assert rendered.status_code == 400
    assert rendered.payload == {
        "message": "identifier required", "error": "VALIDATION_ERROR",
    }


def test_not_found_renders_404():
    rendered = render(NotFound(CustomerKey(99999)))
    assert rendered.status_code == 404
    assert rendered.payload == {
        "message": "Customer not found", "error": "NOT_FOUND",
    }


def test_system_failure_renders_500_without_cause():
    cause = RuntimeError("password=hunter2 at db.internal:5432")
    rendered = render(SystemFailure(cause))
    assert rendered.status_code == 500
    assert rendered.payload == {
        "message": "An unexpected error occurred", "error": "INTERNAL_ERROR",
    }
    assert "hunter2" not in json.dumps(rendered.payload)


def test_render_rejects_non_outcome():
    with pytest.raises(TypeError):
        render("success")


# ─── purity ──────────────────────────────────────────────────────

def test_same_outcome_renders_identical_bytes(acme_record):
    outcome = Success(acme_record)
    first = json.dumps(render(outcome).payload)
    second = json.dumps(render(outcome).payload)
    assert first == second


def test_mutating_payload_does_not_touch_outcome(acme_record):
    outcome = Success(acme_record)
    payload = render(outcome).payload
    payload["balance"] = "0.00"
    assert outcome.record.balance == Decimal("1500.75")
    assert render(outcome).payload["balance"] == "1500.75"
