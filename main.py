# main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from routers import invoices, leases, tenants
from utils.logging import setup_logging

logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="LeaseKeeper", description="Tenants, sites, leases and their billing ledgers")

# CORS
app.add_middleware(
     CORSMiddleware,
     allow_origins=config.CORS_ORIGINS,
     allow_credentials=True,
     allow_methods=["*"],
     allow_headers=["*"],
)

app.include_router(tenants.router)
app.include_router(leases.router)
app.include_router(invoices.router)


@app.get("/api/health")
def health():
     return {"status": "ok", "storage": config.STORAGE_BACKEND}


# 404 Fallback Middleware
@app.middleware("http")
async def not_found_middleware(request: Request, call_next):
     try:
          response = await call_next(request)
          # Unmatched paths only; routes keep their own 404 detail.
          if response.status_code == 404 and "endpoint" not in request.scope:
               return JSONResponse(status_code=404, content={"error": "Route not found"})
          return response
     except Exception:
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
     setup_logging()
     uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
