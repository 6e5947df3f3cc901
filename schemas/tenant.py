# schemas/tenant.py
"""
Pydantic schemas for tenant and site API request/response validation.
"""
from typing import List
from pydantic import BaseModel, Field, ConfigDict

from models import Dwelling, Site, Tenant


class TenantCreate(BaseModel):
     """Schema for registering a tenant."""
     name: str = Field(..., description="Unique tenant name")
     contact: str = Field("", description="Where notifications are delivered (email or phone)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Jane Citizen",
                    "contact": "jane@example.com"
               }
          }
     )

     def to_entity(self) -> Tenant:
          return Tenant(name=self.name, contact=self.contact)


class TenantResponse(BaseModel):
     name: str
     contact: str

     @classmethod
     def from_entity(cls, tenant: Tenant) -> "TenantResponse":
          return cls(name=tenant.name, contact=tenant.contact)


class SiteCreate(BaseModel):
     """Schema for listing a site."""
     number: str = Field(..., description="Unique site number")
     dwelling: Dwelling = Field(Dwelling.CABIN, description="Cabin, Flat or House")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "number": "A1",
                    "dwelling": "Cabin"
               }
          }
     )

     def to_entity(self) -> Site:
          return Site(number=self.number, dwelling=self.dwelling)


class SiteResponse(BaseModel):
     number: str
     dwelling: Dwelling

     @classmethod
     def from_entity(cls, site: Site) -> "SiteResponse":
          return cls(number=site.number, dwelling=site.dwelling)


class TenantListResponse(BaseModel):
     tenants: List[TenantResponse]
     total: int


class SiteListResponse(BaseModel):
     sites: List[SiteResponse]
     total: int
