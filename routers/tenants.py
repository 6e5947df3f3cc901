# routers/tenants.py
"""
Tenant and site registration API routes.
"""
from fastapi import APIRouter, Depends, status

from dependencies import get_leasing_service
from schemas.tenant import (
     TenantCreate,
     TenantResponse,
     TenantListResponse,
     SiteCreate,
     SiteResponse,
     SiteListResponse,
)
from services import LeasingError, LeasingService
from . import http_error

router = APIRouter(prefix="/api", tags=["tenants"])


@router.post(
     "/tenants",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a tenant"
)
def register_tenant(body: TenantCreate, leasing: LeasingService = Depends(get_leasing_service)):
     """
     Register a new tenant.

     - **name**: must be non-empty and not already registered
     - **contact**: address used when sending invoices
     """
     try:
          tenant = leasing.register_tenant(body.to_entity())
     except LeasingError as e:
          raise http_error(e)
     return TenantResponse.from_entity(tenant)


@router.get("/tenants", response_model=TenantListResponse, summary="List tenants")
def list_tenants(leasing: LeasingService = Depends(get_leasing_service)):
     tenants = [TenantResponse.from_entity(t) for t in leasing.tenants()]
     return TenantListResponse(tenants=tenants, total=len(tenants))


@router.post(
     "/sites",
     response_model=SiteResponse,
     status_code=status.HTTP_201_CREATED,
     summary="List a site"
)
def list_site(body: SiteCreate, leasing: LeasingService = Depends(get_leasing_service)):
     """
     Enter a new leasable site. Site numbers are unique.
     """
     try:
          site = leasing.list_site(body.to_entity())
     except LeasingError as e:
          raise http_error(e)
     return SiteResponse.from_entity(site)


@router.get("/sites", response_model=SiteListResponse, summary="List sites")
def list_sites(leasing: LeasingService = Depends(get_leasing_service)):
     sites = [SiteResponse.from_entity(s) for s in leasing.sites()]
     return SiteListResponse(sites=sites, total=len(sites))
