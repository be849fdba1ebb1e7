"""ai 도메인 라우터

이미지 분류 모델 추론 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import verify_internal_api_key
from app.core.schemas import APIResponse, ErrorResponse, create_response
from app.domains.ai.inference import (
    HuggingFaceInferenceClient,
    get_inference_client,
)
from app.domains.ai.schemas import ImageClassifyRequest
from app.domains.ai.service import ImageClassificationService
from app.domains.waste.schemas import PredictionsClassifyResponse

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_image_classification_service(
    session: AsyncSession = Depends(get_db),
    client: HuggingFaceInferenceClient = Depends(get_inference_client),
) -> ImageClassificationService:
    """ImageClassificationService 의존성"""
    return ImageClassificationService(session, client)


@router.post(
    "/classify",
    response_model=APIResponse[PredictionsClassifyResponse],
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def classify_image(
    request: ImageClassifyRequest,
    service: ImageClassificationService = Depends(
        get_image_classification_service
    ),
):
    """이미지 분류

    추론 토큰이 없으면 503(INFERENCE_NOT_CONFIGURED)을 반환하므로
    클라이언트는 /api/waste/classify(파일명 기반)로 대체합니다.

    Example::

        POST /api/ai/classify
        {
            "imageBase64": "iVBORw0KGgo...",
            "mime": "image/jpeg",
            "userId": 1
        }
    """
    result = await service.classify(request)
    return create_response(data=result, message="분류가 완료되었습니다.")
