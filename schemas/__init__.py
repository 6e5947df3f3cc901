# schemas/__init__.py
from .tenant import (
     TenantCreate,
     TenantResponse,
     TenantListResponse,
     SiteCreate,
     SiteResponse,
     SiteListResponse,
)
from .lease import (
     LeaseCreate,
     LeaseResponse,
     LeaseListResponse,
     LeaseRef,
     ServiceCharge,
     ServiceResponse,
     SendInvoiceResponse,
)
from .invoice import (
     InvoiceCreate,
     UtilityInvoiceCreate,
     InvoiceResponse,
     InvoiceListResponse,
)
from .payment import PaymentCreate, LeasePaymentCreate

__all__ = [
     "TenantCreate",
     "TenantResponse",
     "TenantListResponse",
     "SiteCreate",
     "SiteResponse",
     "SiteListResponse",
     "LeaseCreate",
     "LeaseResponse",
     "LeaseListResponse",
     "LeaseRef",
     "ServiceCharge",
     "ServiceResponse",
     "SendInvoiceResponse",
     "InvoiceCreate",
     "UtilityInvoiceCreate",
     "InvoiceResponse",
     "InvoiceListResponse",
     "PaymentCreate",
     "LeasePaymentCreate",
]
