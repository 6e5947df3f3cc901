# services/leasing_service.py
"""
Leasing Service - use cases over the entity store.

Registers tenants, lists sites, creates leases, bills and credits lease
services and sends utility invoices. Uniqueness is checked with a query
before each write so bad input fails fast with a clear message; the store
enforces the same rules again when the write happens.
"""
import logging
from datetime import datetime
from typing import List, Optional

from models import DEFAULT_SERVICES, UTILITY, Lease, Payment, Service, Site, Tenant, Term
from storage import (
     DuplicateEntityError,
     EntityConflictError,
     EntityStore,
     StorageError,
     is_kind,
     where,
)
from utils.currency import Currency
from .errors import (
     DuplicateError,
     InvalidPaymentError,
     LeaseConflictError,
     LeaseNotFoundError,
     LeaseValidationError,
     NotFoundError,
     NotifyError,
     PersistenceFailure,
)
from .invoice_service import InvoiceService
from .notifier import Notifier

logger = logging.getLogger(__name__)


class LeasingService:
     """Implements the leasing use cases."""

     def __init__(
          self,
          store: EntityStore,
          notifier: Notifier,
          invoices: Optional[InvoiceService] = None,
     ):
          self.store = store
          self.notifier = notifier
          self.invoices = invoices or InvoiceService(store)

     # ------------------------------------------------------------------
     # Registration
     # ------------------------------------------------------------------

     def register_tenant(self, tenant: Tenant) -> Tenant:
          """
          Enter a new, unique tenant.

          Raises:
               LeaseValidationError: If the name is empty
               DuplicateError: If a tenant with the same name exists
          """
          tenant = tenant.model_copy(update={"name": tenant.name.strip()})
          if not tenant.name:
               raise LeaseValidationError("name required")
          with self.store.guard():
               if self.store.query(where(Tenant, name=tenant.name)) is not None:
                    raise DuplicateError(f"{tenant.name} already exists")
               self._create("saving tenant", tenant)
          logger.info("Registered tenant %s", tenant.name)
          return tenant

     def list_site(self, site: Site) -> Site:
          """
          Enter a new, unique, leasable site.

          Raises:
               LeaseValidationError: If the number is empty
               DuplicateError: If a site with the same number exists
          """
          site = site.model_copy(update={"number": site.number.strip()})
          if not site.number:
               raise LeaseValidationError("site number required")
          with self.store.guard():
               if self.store.query(where(Site, number=site.number)) is not None:
                    raise DuplicateError(f"{site.number} already exists")
               self._create("saving site", site)
          logger.info("Listed site %s (%s)", site.number, site.dwelling)
          return site

     def create_lease(self, tenant: str, site: str, term: Term, rent: Currency) -> Lease:
          """
          Create a lease of site by tenant for term.

          Conflicts are detected by exact term equality: a second lease on the
          same site with an identical term is rejected, different terms on the
          same site are accepted even when they overlap.

          Returns:
               Created Lease with empty "rent" and "utility" services

          Raises:
               NotFoundError: If the tenant or site does not exist
               LeaseConflictError: If the site is already leased for this term
          """
          lease = Lease(
               tenant=tenant,
               site=site,
               term=term,
               rent=rent,
               services={name: Service() for name in DEFAULT_SERVICES},
          )
          with self.store.guard():
               if self.store.query(where(Tenant, name=tenant)) is None:
                    raise NotFoundError(f"tenant {tenant} does not exist")
               if self.store.query(where(Site, number=site)) is None:
                    raise NotFoundError(f"site {site} does not exist")
               if self.store.query(where(Lease, site=site, term=lease.term)) is not None:
                    raise LeaseConflictError("lease conflict: site already leased during this term")
               self._create("saving lease", lease)
          logger.info("Created lease %s", lease.identity())
          return lease

     # ------------------------------------------------------------------
     # Queries
     # ------------------------------------------------------------------

     def tenants(self) -> List[Tenant]:
          return self.store.list(is_kind(Tenant))

     def sites(self) -> List[Site]:
          return self.store.list(is_kind(Site))

     def leases(self, tenant: Optional[str] = None, site: Optional[str] = None) -> List[Lease]:
          fields = {}
          if tenant is not None:
               fields["tenant"] = tenant
          if site is not None:
               fields["site"] = site
          return self.store.list(where(Lease, **fields))

     def find_lease(self, tenant: str, site: str) -> Lease:
          """
          Raises:
               LeaseNotFoundError: If tenant does not lease site
          """
          lease = self.store.query(where(Lease, tenant=tenant), where(Lease, site=site))
          if lease is None:
               raise LeaseNotFoundError(f"no lease of site {site} by {tenant}")
          return lease

     # ------------------------------------------------------------------
     # Services
     # ------------------------------------------------------------------

     def bill_service(
          self,
          tenant: str,
          site: str,
          service: str,
          amount: Currency,
          issued: Optional[datetime] = None,
     ) -> Lease:
          """
          Charge a lease service: issues an invoice for amount and records it
          as a debit on the service.
          """
          with self.store.guard():
               lease = self.find_lease(tenant, site)
               ledger = self._service(lease, service)
               invoice = self.invoices.issue(amount, issued=issued)
               ledger.debits.append(invoice.bill)
               ledger.invoices.append(invoice.id)
               self._update("billing service", lease)
          return lease

     def pay_service(self, tenant: str, site: str, service: str, amount: Currency) -> Lease:
          """Credit a lease service directly, without an invoice."""
          if amount <= 0:
               raise InvalidPaymentError(f"payment must be positive, got {Currency(amount)}")
          with self.store.guard():
               lease = self.find_lease(tenant, site)
               self._service(lease, service).credits.append(Currency(amount))
               self._update("paying service", lease)
          return lease

     def pay_invoice(
          self,
          tenant: str,
          site: str,
          service: str,
          invoice_id: int,
          payment: Payment,
     ) -> Lease:
          """Apply payment to one of the service's invoices and credit the service."""
          with self.store.guard():
               lease = self.find_lease(tenant, site)
               ledger = self._service(lease, service)
               if invoice_id not in ledger.invoices:
                    raise NotFoundError(f"invoice {invoice_id} does not belong to {service} of {lease.identity()}")
               self.invoices.pay(invoice_id, payment)
               ledger.credits.append(payment.amount)
               self._update("paying invoice", lease)
          return lease

     # ------------------------------------------------------------------
     # Invoices
     # ------------------------------------------------------------------

     def send_invoice(self, tenant: Tenant, site: Site) -> Optional[str]:
          """
          Notify the tenant of the utility amount owed on their lease of site.

          Nothing is sent when the utility balance is zero or in credit.

          Returns:
               The message sent, or None

          Raises:
               LeaseNotFoundError: If tenant does not lease site
               NotifyError: If delivery failed
          """
          lease = self.find_lease(tenant.name, site.number)
          utilities = lease.services.get(UTILITY)
          if utilities is None:
               return None
          balance = utilities.balance()
          if balance >= 0:
               return None

          message = f"you owe {abs(balance)} in utilities"
          try:
               self.notifier.notify(tenant.contact, message)
          except NotifyError as e:
               raise NotifyError(f"sending invoice: {e}") from e
          logger.info("Sent utility invoice to %s for site %s", tenant.name, site.number)
          return message

     def send_invoice_for(self, tenant: str, site: str) -> Optional[str]:
          """
          send_invoice, looking the tenant and site up by name and number.

          Raises:
               NotFoundError: If the tenant or site does not exist
          """
          found_tenant = self.store.query(where(Tenant, name=tenant))
          if found_tenant is None:
               raise NotFoundError(f"tenant {tenant} does not exist")
          found_site = self.store.query(where(Site, number=site))
          if found_site is None:
               raise NotFoundError(f"site {site} does not exist")
          return self.send_invoice(found_tenant, found_site)

     # ------------------------------------------------------------------
     # Helpers
     # ------------------------------------------------------------------

     @staticmethod
     def _service(lease: Lease, name: str) -> Service:
          try:
               return lease.services[name]
          except KeyError:
               raise NotFoundError(f"lease {lease.identity()} has no {name} service") from None

     def _create(self, operation: str, entity) -> None:
          try:
               self.store.create(entity)
          except EntityConflictError as e:
               raise LeaseConflictError(f"{operation}: {e}") from e
          except DuplicateEntityError as e:
               raise DuplicateError(f"{operation}: {e}") from e
          except StorageError as e:
               raise PersistenceFailure(f"{operation}: {e}") from e

     def _update(self, operation: str, entity) -> None:
          try:
               self.store.update(entity)
          except StorageError as e:
               raise PersistenceFailure(f"{operation}: {e}") from e
