# routers/__init__.py
from fastapi import HTTPException, status

from services import (
     LeasingError,
     DuplicateError,
     LeaseConflictError,
     LeaseValidationError,
     NotFoundError,
     NotifyError,
)


def http_error(e: LeasingError) -> HTTPException:
     """Map a use-case failure to the matching HTTP error."""
     if isinstance(e, (DuplicateError, LeaseConflictError)):
          code = status.HTTP_409_CONFLICT
     elif isinstance(e, LeaseValidationError):
          code = status.HTTP_400_BAD_REQUEST
     elif isinstance(e, NotFoundError):
          code = status.HTTP_404_NOT_FOUND
     elif isinstance(e, NotifyError):
          code = status.HTTP_502_BAD_GATEWAY
     else:
          code = status.HTTP_500_INTERNAL_SERVER_ERROR
     return HTTPException(status_code=code, detail=str(e))
