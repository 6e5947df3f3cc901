# schemas/lease.py
"""
Pydantic schemas for lease API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from models import Lease, Service, Term
from utils.timestamps import UTCDateTime


class LeaseCreate(BaseModel):
     """Schema for creating a lease."""
     tenant: str = Field(..., min_length=1, description="Registered tenant name")
     site: str = Field(..., min_length=1, description="Listed site number")
     start: UTCDateTime = Field(..., description="Start of the term")
     days: int = Field(..., ge=0, description="Length of the term in days")
     rent: Decimal = Field(..., ge=0, max_digits=12, decimal_places=3, description="Rent amount")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenant": "Jane Citizen",
                    "site": "A1",
                    "start": "2026-11-01T00:00:00Z",
                    "days": 180,
                    "rent": 250.00
               }
          }
     )

     def term(self) -> Term:
          return Term(start=self.start, days=self.days)


class ServiceResponse(BaseModel):
     balance: Decimal
     credits: List[Decimal]
     debits: List[Decimal]
     invoices: List[int]

     @classmethod
     def from_service(cls, service: Service) -> "ServiceResponse":
          return cls(
               balance=service.balance().to_decimal(),
               credits=[c.to_decimal() for c in service.credits],
               debits=[d.to_decimal() for d in service.debits],
               invoices=list(service.invoices),
          )


class LeaseResponse(BaseModel):
     id: str
     tenant: str
     site: str
     start: datetime
     end: datetime
     days: int
     rent: Decimal
     services: Dict[str, ServiceResponse]

     @classmethod
     def from_entity(cls, lease: Lease) -> "LeaseResponse":
          return cls(
               id=lease.identity(),
               tenant=lease.tenant,
               site=lease.site,
               start=lease.term.start,
               end=lease.term.end(),
               days=lease.term.days,
               rent=lease.rent.to_decimal(),
               services={name: ServiceResponse.from_service(s) for name, s in lease.services.items()},
          )


class LeaseListResponse(BaseModel):
     leases: List[LeaseResponse]
     total: int


class LeaseRef(BaseModel):
     """Identifies the lease of a site by a tenant."""
     tenant: str = Field(..., min_length=1)
     site: str = Field(..., min_length=1)


class ServiceCharge(LeaseRef):
     """Schema for billing or crediting a lease service."""
     service: str = Field("utility", description="Service name, e.g. rent or utility")
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=3)
     issued: Optional[UTCDateTime] = Field(None, description="Invoice issue time (billing only)")


class SendInvoiceResponse(BaseModel):
     sent: bool
     message: Optional[str] = None
