"""API 라우터"""

from typing import Any

from fastapi import APIRouter

from app.core.config import settings
from app.core.schemas import APIResponse
from app.domains.ai.router import router as ai_router
from app.domains.waste.router import router as waste_router

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(waste_router, prefix="/waste", tags=["Waste"])
api_router.include_router(ai_router, prefix="/ai", tags=["AI"])


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_root():
    """API 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message=f"{settings.app_name}",
        data={
            "version": "0.1.0",
            "docs": "/docs",
            "inference_enabled": settings.inference_enabled,
        },
    )
