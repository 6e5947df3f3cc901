# dependencies.py
"""
FastAPI dependencies shared by the routers.

The store is opened once per process from configuration. Tests replace
get_store / get_notifier / get_clock through app.dependency_overrides.
"""
from datetime import datetime
from typing import Callable, Optional

from fastapi import Depends

from services import InvoiceService, LeasingService, Notifier, build_notifier
from services.invoice_service import utc_now
from storage import EntityStore, open_store

_store: Optional[EntityStore] = None


def get_store() -> EntityStore:
     global _store
     if _store is None:
          _store = open_store()
     return _store


def get_notifier() -> Notifier:
     return build_notifier()


def get_clock() -> Callable[[], datetime]:
     return utc_now


def get_invoice_service(
     store: EntityStore = Depends(get_store),
     clock: Callable[[], datetime] = Depends(get_clock),
) -> InvoiceService:
     return InvoiceService(store, clock=clock)


def get_leasing_service(
     store: EntityStore = Depends(get_store),
     notifier: Notifier = Depends(get_notifier),
     invoices: InvoiceService = Depends(get_invoice_service),
) -> LeasingService:
     return LeasingService(store, notifier, invoices=invoices)
