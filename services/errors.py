# services/errors.py


class LeasingError(Exception):
     """Base class for use-case failures. None are fatal; callers decide whether to proceed."""


class LeaseValidationError(LeasingError, ValueError):
     """Input rejected before any mutation."""


class DuplicateError(LeaseValidationError):
     """An entity with the same identity already exists."""


class LeaseConflictError(LeaseValidationError):
     """The site is already leased for an identical term."""


class InvalidPaymentError(LeaseValidationError):
     """Payment amount is zero or negative."""


class NotFoundError(LeasingError, LookupError):
     """Referenced entity does not exist."""


class InvoiceNotFoundError(NotFoundError):
     pass


class LeaseNotFoundError(NotFoundError):
     pass


class PersistenceFailure(LeasingError):
     """The entity store could not write."""


class NotifyError(LeasingError):
     """A message could not be delivered to its recipient."""
