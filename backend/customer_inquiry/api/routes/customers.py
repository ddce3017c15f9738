"""Customer Inquiry Routes — path-parameter and request-body lookup surfaces.

Invariants:
    - Both surfaces call the same InquiryService.inquire() → render() sequence
    - The path parameter is taken as text; numeric checks belong to the core validator
    - Every response carries X-Request-ID (caller-supplied or generated)

Design Decisions:
    - JSONResponse built from render(): status and payload come from one pure mapping,
      not from response_model / exception handlers
    - Store resolved through get_customer_store: tests override it via dependency_overrides
"""

import time
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from customer_inquiry.config import get_settings
from customer_inquiry.core.render import render
from customer_inquiry.core.repository_protocols import (
    CustomerStore, SyncCustomerStore,
)
from customer_inquiry.infrastructure.observability import request_logger
from customer_inquiry.schemas.customer import (
    CustomerInquiryRequest, CustomerResponse, ErrorResponse,
)
from customer_inquiry.services.inquiry_service import (
    InquiryContext, InquiryService,
)

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])

REQUEST_ID_HEADER = "X-Request-ID"

_RESPONSES = {
    200: {"model": CustomerResponse},
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_customer_store(request: Request) -> CustomerStore | SyncCustomerStore:
    """Store placed on app.state by the lifespan."""
    return request.app.state.customer_store


def get_inquiry_service(
    store: CustomerStore | SyncCustomerStore = Depends(get_customer_store),
) -> InquiryService:
    return InquiryService(
        store, timeout_seconds=get_settings().store_timeout_seconds,
    )


@router.get("/{customer_number}", responses=_RESPONSES)
async def get_customer(
    customer_number: str,
    request: Request,
    service: InquiryService = Depends(get_inquiry_service),
):
    """Look up one customer by number (path parameter)."""
    return await _run_inquiry(customer_number, request, service)


@router.post("/inquire", responses=_RESPONSES)
async def inquire_customer(
    body: CustomerInquiryRequest,
    request: Request,
    service: InquiryService = Depends(get_inquiry_service),
):
    """Look up one customer by number (request body)."""
    return await _run_inquiry(body.customer_number, request, service)


async def _run_inquiry(
    raw_key: object, request: Request, service: InquiryService,
) -> JSONResponse:
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    log = request_logger(__name__, request_id, path=request.url.path)
    started = time.perf_counter()

    outcome = await service.inquire(
        raw_key, InquiryContext(request_id=request_id, log=log),
    )
    rendered = render(outcome)

    log.debug(
        f"Inquiry rendered with status {rendered.status_code}",
        extra={
            "outcome": outcome.kind.value,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return JSONResponse(
        status_code=rendered.status_code,
        content=rendered.payload,
        headers={REQUEST_ID_HEADER: request_id},
    )
