# routers/invoices.py
"""
Invoice API routes.

Issue invoices, read them back and apply payments. Payments may arrive in
any order and in chunks; see services.invoice_service for the rules.
"""
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query, status

from dependencies import get_clock, get_invoice_service
from models import InvoiceStatus
from schemas.invoice import (
     InvoiceCreate,
     UtilityInvoiceCreate,
     InvoiceResponse,
     InvoiceListResponse,
)
from schemas.payment import PaymentCreate
from services import InvoiceService, LeasingError
from utils.currency import Currency
from . import http_error

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
     "",
     response_model=InvoiceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Issue a new invoice"
)
def create_invoice(
     body: InvoiceCreate,
     invoices: InvoiceService = Depends(get_invoice_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     """
     Issue an invoice.

     - **amount**: Invoice amount (must be positive)
     - **issued**: Issue time; the due date follows after the invoice net period
     """
     try:
          invoice = invoices.issue(Currency.from_decimal(body.amount), issued=body.issued)
     except LeasingError as e:
          raise http_error(e)
     return InvoiceResponse.from_entity(invoice, clock())


@router.post(
     "/utility",
     response_model=InvoiceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Issue a utility invoice"
)
def create_utility_invoice(
     body: UtilityInvoiceCreate,
     invoices: InvoiceService = Depends(get_invoice_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     try:
          invoice = invoices.issue_utility_invoice(
               Currency.from_decimal(body.unit_cost),
               body.units_consumed,
               issued=body.issued,
          )
     except LeasingError as e:
          raise http_error(e)
     return InvoiceResponse.from_entity(invoice, clock())


@router.get("", response_model=InvoiceListResponse, summary="List invoices")
def list_invoices(
     status: Optional[InvoiceStatus] = Query(None, description="Filter by status"),
     invoices: InvoiceService = Depends(get_invoice_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     now = clock()
     items = [InvoiceResponse.from_entity(inv, now) for inv in invoices.invoices(status=status)]
     return InvoiceListResponse(invoices=items, total=len(items))


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Get an invoice")
def get_invoice(
     invoice_id: int,
     invoices: InvoiceService = Depends(get_invoice_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     try:
          invoice = invoices.get(invoice_id)
     except LeasingError as e:
          raise http_error(e)
     return InvoiceResponse.from_entity(invoice, clock())


@router.post(
     "/{invoice_id}/payments",
     response_model=InvoiceResponse,
     summary="Apply a payment"
)
def pay_invoice(
     invoice_id: int,
     body: PaymentCreate,
     invoices: InvoiceService = Depends(get_invoice_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     """
     Record a payment against an invoice.

     Each call adds one credit. The invoice is marked paid by the payment
     that brings total credits up to the bill.
     """
     now = clock()
     try:
          invoice = invoices.pay(invoice_id, body.to_payment(now))
     except LeasingError as e:
          raise http_error(e)
     return InvoiceResponse.from_entity(invoice, now)
