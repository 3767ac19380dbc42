from fastapi import APIRouter

from app.analyzer import COMMON_ATS_KEYWORDS

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "reference_keywords": len(COMMON_ATS_KEYWORDS)}
