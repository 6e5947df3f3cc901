# services/__init__.py
from .errors import (
     LeasingError,
     LeaseValidationError,
     DuplicateError,
     LeaseConflictError,
     InvalidPaymentError,
     NotFoundError,
     InvoiceNotFoundError,
     LeaseNotFoundError,
     PersistenceFailure,
     NotifyError,
)
from .invoice_service import InvoiceService
from .leasing_service import LeasingService
from .notifier import Notifier, ConsoleNotifier, EmailNotifier, SMSNotifier, build_notifier

__all__ = [
     "LeasingError",
     "LeaseValidationError",
     "DuplicateError",
     "LeaseConflictError",
     "InvalidPaymentError",
     "NotFoundError",
     "InvoiceNotFoundError",
     "LeaseNotFoundError",
     "PersistenceFailure",
     "NotifyError",
     "InvoiceService",
     "LeasingService",
     "Notifier",
     "ConsoleNotifier",
     "EmailNotifier",
     "SMSNotifier",
     "build_notifier",
]
