# models/invoice.py
import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from utils.currency import Currency
from utils.timestamps import UTCDateTime
from .entity import Entity


class InvoiceStatus(str, enum.Enum):
     """Enumeration for invoice payment status."""
     PENDING = "PENDING"
     PAID = "PAID"
     OVERDUE = "OVERDUE"


class Payment(BaseModel):
     """A timestamped amount."""
     time: UTCDateTime
     amount: Currency


class Ledger(BaseModel):
     """Credits and debits of payment records, kept in the order applied."""
     credits: List[Payment] = Field(default_factory=list)
     debits: List[Payment] = Field(default_factory=list)

     def total_credits(self) -> Currency:
          return sum((p.amount for p in self.credits), Currency(0))

     def total_debits(self) -> Currency:
          return sum((p.amount for p in self.debits), Currency(0))

     def balance(self) -> Currency:
          return self.total_credits() - self.total_debits()


class Invoice(Entity):
     """
     Invoice - a billable obligation covered incrementally by payments.

     The bill is recorded as a debit on the balance when issued. Paid stays
     unset until credits reach the bill, then holds the time of the payment
     that crossed the threshold.
     """
     id: int = 0
     bill: Currency
     issued: Optional[UTCDateTime] = None
     due: Optional[UTCDateTime] = None
     balance: Ledger = Field(default_factory=Ledger)
     paid: Optional[UTCDateTime] = None

     def identity(self) -> str:
          return str(self.id)

     @property
     def is_paid(self) -> bool:
          return self.paid is not None

     def outstanding(self) -> Currency:
          """Amount still required to cover the bill (never negative)."""
          return max(self.bill - self.balance.total_credits(), Currency(0))

     def status(self, at: datetime) -> InvoiceStatus:
          if self.is_paid:
               return InvoiceStatus.PAID
          if self.due is not None and self.due < at:
               return InvoiceStatus.OVERDUE
          return InvoiceStatus.PENDING

     def __repr__(self):
          return f"<Invoice(id={self.id}, bill={self.bill}, paid={self.paid})>"
