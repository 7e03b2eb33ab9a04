# /privy_lookup/api/router.py
"""
API router that includes all endpoint routers.
"""
from fastapi import APIRouter
from privy_lookup.api.endpoints import lookup_user

# Create main router
router = APIRouter()

# Include all endpoint routers
router.include_router(lookup_user.router, tags=["Lookup"])
