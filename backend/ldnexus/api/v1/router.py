"""API v1 router aggregator.

All v1 endpoint routers are included here, mounted at /api/v1.
"""

from fastapi import APIRouter

from ldnexus.api.v1 import matching

router = APIRouter()

# =============================================================================
# Matching
# =============================================================================

router.include_router(matching.router, prefix="/matching", tags=["matching"])
