"""Customer Schemas — Pydantic models for the inquiry API boundary.

Invariants:
    - CustomerInquiryRequest does NOT validate customerNumber: the raw value is handed
      to validate_customer_key() so both surfaces share one validation policy
    - Response models are documentation only; payloads come from core/render.py

Design Decisions:
    - Any for customerNumber: Pydantic coercion would turn true into 1 and reject
      "abc" with a different error shape than the core validator
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CustomerInquiryRequest(BaseModel):
    """Body of POST /customers/inquire."""
    model_config = ConfigDict(populate_by_name=True)

    customer_number: Any = Field(None, alias="customerNumber")


class CustomerResponse(BaseModel):
    """Success payload. Absent fields are omitted from the JSON body."""
    customerNumber: int
    customerName: str | None = None
    address1: str | None = None
    city: str | None = None
    state: str | None = None
    zipCode: int | str | None = None
    phone: str | None = None
    balance: str | None = Field(None, examples=["1500.75"])
    creditLimit: str | None = Field(None, examples=["5000.00"])
    lastOrderDate: str | None = Field(None, examples=["2024-01-15"])


class ErrorResponse(BaseModel):
    """Failure payload for 400 / 404 / 500."""
    message: str
    error: str = Field(examples=["VALIDATION_ERROR", "NOT_FOUND", "INTERNAL_ERROR"])
