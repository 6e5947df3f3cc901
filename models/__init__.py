# models/__init__.py
from .base import Base
from .entity import Entity
from .tenant import Tenant
from .site import Site, Dwelling
from .lease import Lease, Term, Service, RENT, UTILITY, DEFAULT_SERVICES
from .invoice import Invoice, InvoiceStatus, Ledger, Payment
from .record import EntityRecord

# Kinds persisted by the entity store, in bucket order.
ENTITY_TYPES = (Tenant, Site, Lease, Invoice)

__all__ = [
     "Base",
     "Entity",
     "Tenant",
     "Site",
     "Dwelling",
     "Lease",
     "Term",
     "Service",
     "RENT",
     "UTILITY",
     "DEFAULT_SERVICES",
     "Invoice",
     "InvoiceStatus",
     "Ledger",
     "Payment",
     "EntityRecord",
     "ENTITY_TYPES",
]
