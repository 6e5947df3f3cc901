# schemas/payment.py
"""
Pydantic schemas for the invoice payment API.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models import Payment
from utils.currency import Currency
from utils.timestamps import UTCDateTime


class PaymentCreate(BaseModel):
     """Request body for POST /api/invoices/{id}/payments."""

     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=3, description="Amount paid")
     time: Optional[UTCDateTime] = Field(None, description="When the payment was made (defaults to now)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 50.00,
                    "time": "2026-11-03T10:30:00Z",
               }
          }
     )

     def to_payment(self, now: datetime) -> Payment:
          return Payment(time=self.time or now, amount=Currency.from_decimal(self.amount))


class LeasePaymentCreate(PaymentCreate):
     """Payment of a lease service invoice."""
     tenant: str = Field(..., min_length=1)
     site: str = Field(..., min_length=1)
     service: str = Field("utility")
     invoice_id: int = Field(..., gt=0)
