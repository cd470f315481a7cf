"""API v1 router initialization."""
from fastapi import APIRouter

from .kyc_analysis import router as kyc_analysis_router

# Create v1 router
router = APIRouter()

router.include_router(
    kyc_analysis_router,
    prefix="/kyc",
    tags=["kyc"]
)
