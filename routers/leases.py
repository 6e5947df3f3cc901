# routers/leases.py
"""
Lease API routes: creation, listing, service billing and utility invoices.
"""
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query, status

from dependencies import get_clock, get_leasing_service
from schemas.lease import (
     LeaseCreate,
     LeaseResponse,
     LeaseListResponse,
     LeaseRef,
     ServiceCharge,
     SendInvoiceResponse,
)
from schemas.payment import LeasePaymentCreate
from services import LeasingError, LeasingService
from utils.currency import Currency
from . import http_error

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.post(
     "",
     response_model=LeaseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a lease"
)
def create_lease(body: LeaseCreate, leasing: LeasingService = Depends(get_leasing_service)):
     """
     Lease a site to a tenant for a term.

     Fails with 404 when the tenant or site is unknown and 409 when the
     site already has a lease with an identical term.
     """
     try:
          lease = leasing.create_lease(
               body.tenant,
               body.site,
               body.term(),
               Currency.from_decimal(body.rent),
          )
     except LeasingError as e:
          raise http_error(e)
     return LeaseResponse.from_entity(lease)


@router.get("", response_model=LeaseListResponse, summary="List leases")
def list_leases(
     tenant: Optional[str] = Query(None, description="Filter by tenant name"),
     site: Optional[str] = Query(None, description="Filter by site number"),
     leasing: LeasingService = Depends(get_leasing_service),
):
     leases = [LeaseResponse.from_entity(lease) for lease in leasing.leases(tenant=tenant, site=site)]
     return LeaseListResponse(leases=leases, total=len(leases))


@router.post("/invoice", response_model=SendInvoiceResponse, summary="Send utility invoice")
def send_invoice(body: LeaseRef, leasing: LeasingService = Depends(get_leasing_service)):
     """
     Notify the tenant of the utility amount owed, if any.
     """
     try:
          message = leasing.send_invoice_for(body.tenant, body.site)
     except LeasingError as e:
          raise http_error(e)
     return SendInvoiceResponse(sent=message is not None, message=message)


@router.post("/bill", response_model=LeaseResponse, summary="Bill a lease service")
def bill_service(body: ServiceCharge, leasing: LeasingService = Depends(get_leasing_service)):
     try:
          lease = leasing.bill_service(
               body.tenant,
               body.site,
               body.service,
               Currency.from_decimal(body.amount),
               issued=body.issued,
          )
     except LeasingError as e:
          raise http_error(e)
     return LeaseResponse.from_entity(lease)


@router.post("/pay", response_model=LeaseResponse, summary="Pay a lease service")
def pay_service(
     body: LeasePaymentCreate,
     leasing: LeasingService = Depends(get_leasing_service),
     clock: Callable[[], datetime] = Depends(get_clock),
):
     """
     Pay one of the invoices issued against a lease service.
     """
     try:
          lease = leasing.pay_invoice(
               body.tenant,
               body.site,
               body.service,
               body.invoice_id,
               body.to_payment(clock()),
          )
     except LeasingError as e:
          raise http_error(e)
     return LeaseResponse.from_entity(lease)
