"""AI 이미지 분류 서비스

base64 이미지를 디코딩해 원격 모델로 추론한 뒤, 예측 라벨을 폐기물 카테고리로 매핑합니다.
"""

import base64
import binascii

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.ai.exceptions import InvalidImagePayloadException
from app.domains.ai.inference import HuggingFaceInferenceClient
from app.domains.ai.schemas import ImageClassifyRequest
from app.domains.waste.schemas import PredictionsClassifyResponse
from app.domains.waste.service import WasteService

logger = get_logger(__name__)


class ImageClassificationService:
    """이미지 분류 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        client: HuggingFaceInferenceClient,
    ):
        self.client = client
        self.waste_service = WasteService(session)

    async def classify(
        self, request: ImageClassifyRequest
    ) -> PredictionsClassifyResponse:
        """이미지 분류

        Raises:
            InvalidImagePayloadException: base64 디코딩 실패
            InferenceNotConfiguredException: 추론 토큰 미설정
            InferenceFailedException: 원격 추론 실패
        """
        image_bytes = decode_image(request.image_base64)

        predictions = await self.client.classify_image(
            image_bytes, mime=request.mime, model_id=request.model_id
        )

        logger.info(
            "Image inference completed",
            extra={
                "request_id": get_request_id(),
                "image_bytes": len(image_bytes),
                "labels": [p.label for p in predictions],
            },
        )

        return await self.waste_service.classify_predictions(
            predictions,
            user_id=request.user_id,
            filename=request.filename,
            source="model",
        )


def decode_image(payload: str) -> bytes:
    """base64 (또는 data URL) 문자열을 이미지 바이트로 변환"""
    if payload.startswith("data:"):
        _, _, payload = payload.partition(",")

    try:
        image_bytes = base64.b64decode(payload.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImagePayloadException(str(e))

    if not image_bytes:
        raise InvalidImagePayloadException("이미지 데이터가 비어 있습니다.")
    return image_bytes
