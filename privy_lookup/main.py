# /privy_lookup/main.py
"""
Main application module for the API.
This is the entry point that initializes the FastAPI app and includes all routes.
"""
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from privy_lookup.api.router import router
from privy_lookup.config import API_PORT, get_cors_origins, get_privy_settings
from privy_lookup.errors import LookupFailure, lookup_failure_handler, method_not_allowed_handler
from privy_lookup.services.privy_client import close_http_client, init_http_client

logging.basicConfig(
    level=logging.INFO,
    stream=sys.stdout,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True  # Override any previous configuration
)

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(
    title="Privy Lookup API",
    description="API for looking up Privy users' wallet addresses by email"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(LookupFailure, lookup_failure_handler)
app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

@app.on_event("startup")
async def startup_event():
    """Create the shared HTTP client when app starts up"""
    logger.info("=== API STARTING UP ===")

    settings = get_privy_settings()
    init_http_client(settings.timeout)
    if not settings.has_credentials:
        logger.warning(f"Privy credentials not set: {', '.join(settings.missing_credentials)}")

    logger.info("=== API READY ===")

@app.on_event("shutdown")
async def shutdown_event():
    """Close the shared HTTP client when app shuts down"""
    logger.info("=== SHUTTING DOWN API ===")
    await close_http_client()

# Root endpoint
@app.get("/")
async def root():
    return {"message": "Privy Lookup API is running"}

# Lookup endpoint lives at /api/lookup-user
app.include_router(router, prefix="/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("privy_lookup.main:app", host="0.0.0.0", port=API_PORT, reload=True)
