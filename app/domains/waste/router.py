"""Waste 도메인 라우터

폐기물 분류, 라벨 보정, 분류 이력 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import verify_internal_api_key
from app.core.schemas import (
    APIResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import PageParams
from app.domains.waste.corrections.service import CorrectionService
from app.domains.waste.history.service import HistoryService
from app.domains.waste.history.types import ClassificationStats
from app.domains.waste.schemas import (
    ClassifyResponse,
    CorrectionRequest,
    CorrectionResponse,
    FilenameClassifyRequest,
    HistoryRecordResponse,
    PredictionsClassifyRequest,
    PredictionsClassifyResponse,
)
from app.domains.waste.service import WasteService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_waste_service(session: AsyncSession = Depends(get_db)) -> WasteService:
    """WasteService 의존성"""
    return WasteService(session)


def get_correction_service(
    session: AsyncSession = Depends(get_db),
) -> CorrectionService:
    """CorrectionService 의존성"""
    return CorrectionService(session)


def get_history_service(
    session: AsyncSession = Depends(get_db),
) -> HistoryService:
    """HistoryService 의존성"""
    return HistoryService(session)


@router.post("/classify", response_model=APIResponse[ClassifyResponse])
async def classify_by_filename(
    request: FilenameClassifyRequest,
    service: WasteService = Depends(get_waste_service),
):
    """파일명 기반 폐기물 분류 (Fallback)"""
    result = await service.classify_filename(request)
    return create_response(data=result, message="분류가 완료되었습니다.")


@router.post(
    "/classify/predictions",
    response_model=APIResponse[PredictionsClassifyResponse],
)
async def classify_by_predictions(
    request: PredictionsClassifyRequest,
    service: WasteService = Depends(get_waste_service),
):
    """이미지 모델 예측 기반 폐기물 분류

    Example::

        POST /api/waste/classify/predictions
        {
            "predictions": [
                {"label": "banana", "probability": 0.7},
                {"label": "plastic bottle", "probability": 0.2}
            ],
            "userId": 1
        }
    """
    result = await service.classify_predictions(
        request.predictions,
        user_id=request.user_id,
        filename=request.filename,
    )
    return create_response(data=result, message="분류가 완료되었습니다.")


@router.post(
    "/corrections",
    response_model=APIResponse[CorrectionResponse],
    status_code=201,
)
async def record_correction(
    request: CorrectionRequest,
    service: CorrectionService = Depends(get_correction_service),
):
    """라벨 보정 기록 (같은 라벨은 덮어씀)"""
    correction = await service.record_correction(
        user_id=request.user_id,
        label=request.label,
        category=request.category,
    )
    return create_response(
        data=CorrectionResponse.model_validate(correction),
        message="라벨 보정이 저장되었습니다.",
    )


@router.get(
    "/corrections", response_model=APIResponse[list[CorrectionResponse]]
)
async def get_corrections(
    user_id: int = Query(..., alias="userId", gt=0, description="사용자 ID"),
    service: CorrectionService = Depends(get_correction_service),
):
    """사용자 라벨 보정 목록 조회"""
    corrections = await service.list_corrections(user_id)
    return create_response(
        data=[CorrectionResponse.model_validate(c) for c in corrections],
        message="라벨 보정 목록을 조회했습니다.",
    )


@router.delete("/corrections", status_code=204)
async def delete_correction(
    user_id: int = Query(..., alias="userId", gt=0, description="사용자 ID"),
    label: str = Query(..., min_length=1, description="모델 라벨"),
    service: CorrectionService = Depends(get_correction_service),
):
    """라벨 보정 삭제"""
    await service.delete_correction(user_id, label)
    return None


@router.get(
    "/history", response_model=ListAPIResponse[HistoryRecordResponse]
)
async def get_history(
    user_id: int = Query(..., alias="userId", gt=0, description="사용자 ID"),
    page_params: PageParams = Depends(),
    service: HistoryService = Depends(get_history_service),
):
    """분류 이력 조회 (최신순)"""
    records, total = await service.get_history(
        user_id, page=page_params.page, size=page_params.size
    )
    return create_list_response(
        data=[HistoryRecordResponse.model_validate(r) for r in records],
        total=total,
        page=page_params.page,
        size=page_params.size,
        message="분류 이력을 조회했습니다.",
    )


@router.get(
    "/history/stats", response_model=APIResponse[ClassificationStats]
)
async def get_history_stats(
    user_id: int = Query(..., alias="userId", gt=0, description="사용자 ID"),
    service: HistoryService = Depends(get_history_service),
):
    """분류 통계 조회 (포인트, 카테고리 분포, 주간 통계, 환경 영향)"""
    stats = await service.get_statistics(user_id)
    return create_response(data=stats, message="분류 통계를 조회했습니다.")
