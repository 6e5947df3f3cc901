# models/lease.py
from datetime import datetime, timedelta
from typing import Dict, Hashable, List

from pydantic import BaseModel, ConfigDict, Field

from utils.currency import Currency
from utils.timestamps import UTCDateTime
from .entity import Entity


RENT = "rent"
UTILITY = "utility"
DEFAULT_SERVICES = (RENT, UTILITY)


class Term(BaseModel):
     """
     Active duration of a lease: a start instant plus a number of days.
     Two terms are equal only when both start and days are identical.
     """
     model_config = ConfigDict(frozen=True)

     start: UTCDateTime
     days: int = Field(..., ge=0)

     def end(self) -> datetime:
          return self.start + timedelta(days=self.days)

     def overlaps(self, other: "Term") -> bool:
          """Whether both terms share at least part of a day."""
          return self.start < other.end() and other.start < self.end()

     def __str__(self) -> str:
          return f"{self.start:%d/%m/%Y} - {self.end():%d/%m/%Y}"


class Service(BaseModel):
     """
     Billable service of a lease (rent, utility).

     Credits are payments received, debits are charges. A negative
     balance is money owed by the tenant.
     """
     credits: List[Currency] = Field(default_factory=list)
     debits: List[Currency] = Field(default_factory=list)
     # Invoices issued against this service, by invoice id.
     invoices: List[int] = Field(default_factory=list)

     def balance(self) -> Currency:
          return sum(self.credits, Currency(0)) - sum(self.debits, Currency(0))


class Lease(Entity):
     """
     Lease - exclusive use of a site by one tenant for the given term.
     Services are keyed by name, typically "rent" and "utility".
     """
     tenant: str
     site: str
     term: Term
     rent: Currency = Currency(0)
     services: Dict[str, Service] = Field(default_factory=dict)

     def identity(self) -> str:
          return f"{self.tenant}-{self.site}-{self.term.start.isoformat()}-{self.term.days}"

     def conflict_key(self) -> Hashable:
          # A site cannot carry two leases with the same term.
          return (self.site, self.term)

     def __repr__(self):
          return f"<Lease(tenant='{self.tenant}', site='{self.site}', term='{self.term}')>"
