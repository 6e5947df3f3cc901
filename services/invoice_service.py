# services/invoice_service.py
"""
Invoice Service - the billing ledger.

Issues invoices and applies payments to them. Payments may arrive in any
order and in any number of chunks; each one is recorded as a separate
credit on the named invoice only. An invoice is paid once its credits
reach the bill, and keeps the time of the payment that crossed that line.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

import config
from models import Invoice, InvoiceStatus, Ledger, Payment
from storage import EntityStore, StorageError, has_identity, is_kind
from utils.currency import Currency
from .errors import InvalidPaymentError, InvoiceNotFoundError, PersistenceFailure

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
     return datetime.now(timezone.utc)


class InvoiceService:
     """Service class for invoice issuing and payment allocation."""

     def __init__(
          self,
          store: EntityStore,
          clock: Callable[[], datetime] = utc_now,
          invoice_net_days: int = config.INVOICE_NET_DAYS,
     ):
          self.store = store
          self.clock = clock
          self.invoice_net_days = invoice_net_days

     def issue(self, bill: Currency, issued: Optional[datetime] = None) -> Invoice:
          """
          Issue a new invoice with the next sequential id.

          The bill is recorded as the single debit of the invoice balance and
          the due date is issued + invoice_net_days.

          Args:
               bill: Amount owed (must be positive)
               issued: Issue time (defaults to now)

          Returns:
               Created Invoice

          Raises:
               InvalidPaymentError: If bill is not positive
          """
          if bill <= 0:
               raise InvalidPaymentError(f"invoice amount must be positive, got {Currency(bill)}")
          issued = issued or self.clock()
          with self.store.guard():
               invoice = Invoice(
                    id=self._next_id(),
                    bill=Currency(bill),
                    issued=issued,
                    due=issued + timedelta(days=self.invoice_net_days),
                    balance=Ledger(debits=[Payment(time=issued, amount=bill)]),
               )
               self._write("issuing invoice", self.store.create, invoice)
          logger.info("Issued invoice %d for %s", invoice.id, invoice.bill)
          return invoice

     def issue_utility_invoice(
          self,
          unit_cost: Currency,
          units_consumed: int,
          issued: Optional[datetime] = None,
     ) -> Invoice:
          """Issue an invoice for metered consumption: unit_cost x units_consumed."""
          if units_consumed < 0:
               raise InvalidPaymentError(f"units consumed cannot be negative, got {units_consumed}")
          return self.issue(Currency(unit_cost) * units_consumed, issued=issued)

     def get(self, invoice_id: int) -> Invoice:
          """
          Raises:
               InvoiceNotFoundError: If no invoice has this id
          """
          invoice = self.store.query(has_identity(Invoice, str(invoice_id)))
          if invoice is None:
               raise InvoiceNotFoundError(f"invoice {invoice_id} not found")
          return invoice

     def pay(self, invoice_id: int, payment: Payment) -> Invoice:
          """
          Apply a payment to an invoice.

          Appends exactly one credit and, when the credits first reach the
          bill, sets Paid to the payment time. Later payments never move Paid.
          Any excess stays on this invoice.

          Raises:
               InvalidPaymentError: If the amount is zero or negative
               InvoiceNotFoundError: If no invoice has this id
          """
          if payment.amount <= 0:
               raise InvalidPaymentError(f"payment must be positive, got {payment.amount}")
          with self.store.guard():
               invoice = self.get(invoice_id)
               invoice.balance.credits.append(payment)
               if invoice.paid is None and invoice.balance.total_credits() >= invoice.bill:
                    invoice.paid = payment.time
                    logger.info("Invoice %d paid at %s", invoice.id, payment.time.isoformat())
               self._write("paying invoice", self.store.update, invoice)
          return invoice

     def invoices(self, status: Optional[InvoiceStatus] = None) -> List[Invoice]:
          """All invoices in issue order, optionally filtered by status as of now."""
          now = self.clock()
          invoices = self.store.list(is_kind(Invoice))
          if status is not None:
               invoices = [inv for inv in invoices if inv.status(now) == status]
          return sorted(invoices, key=lambda inv: inv.id)

     def outstanding(self) -> List[Invoice]:
          """Invoices not yet paid."""
          return [inv for inv in self.invoices() if not inv.is_paid]

     def _next_id(self) -> int:
          ids = [inv.id for inv in self.store.list(is_kind(Invoice))]
          return max(ids, default=0) + 1

     @staticmethod
     def _write(operation: str, write, invoice: Invoice) -> None:
          try:
               write(invoice)
          except StorageError as e:
               raise PersistenceFailure(f"{operation} {invoice.id}: {e}") from e
