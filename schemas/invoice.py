# schemas/invoice.py
"""
Pydantic schemas for Invoice API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from models import Invoice, InvoiceStatus
from utils.timestamps import UTCDateTime


class InvoiceCreate(BaseModel):
     """Schema for issuing a new invoice."""
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=3, description="Invoice amount")
     issued: Optional[UTCDateTime] = Field(None, description="Issue time (defaults to now)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 200.00,
                    "issued": "2026-11-01T00:00:00Z"
               }
          }
     )


class UtilityInvoiceCreate(BaseModel):
     """Schema for issuing a metered utility invoice."""
     unit_cost: Decimal = Field(..., gt=0, max_digits=12, decimal_places=3)
     units_consumed: int = Field(..., ge=0)
     issued: Optional[UTCDateTime] = None


class PaymentRecord(BaseModel):
     time: datetime
     amount: Decimal


class InvoiceResponse(BaseModel):
     """Schema for invoice response."""
     id: int
     bill: Decimal
     issued: Optional[datetime] = None
     due: Optional[datetime] = None
     paid: Optional[datetime] = None
     status: InvoiceStatus
     outstanding: Decimal
     credits: List[PaymentRecord]

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "id": 1,
                    "bill": 200.00,
                    "issued": "2026-11-01T00:00:00Z",
                    "due": "2026-11-15T00:00:00Z",
                    "paid": None,
                    "status": "PENDING",
                    "outstanding": 150.00,
                    "credits": [{"time": "2026-11-03T10:30:00Z", "amount": 50.00}]
               }
          }
     )

     @classmethod
     def from_entity(cls, invoice: Invoice, now: datetime) -> "InvoiceResponse":
          return cls(
               id=invoice.id,
               bill=invoice.bill.to_decimal(),
               issued=invoice.issued,
               due=invoice.due,
               paid=invoice.paid,
               status=invoice.status(now),
               outstanding=invoice.outstanding().to_decimal(),
               credits=[PaymentRecord(time=p.time, amount=p.amount.to_decimal()) for p in invoice.balance.credits],
          )


class InvoiceListResponse(BaseModel):
     """Schema for invoice list response."""
     invoices: List[InvoiceResponse]
     total: int
