"""원격 이미지 분류 모델 클라이언트

Hugging Face Inference API로 이미지를 분류하고 상위 예측 라벨을 반환합니다.
응답 형식: [{"label": "banana", "score": 0.93}, ...]
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.core.config import Settings, settings
from app.core.logging import get_logger
from app.core.utils.time import measure_time
from app.domains.ai.exceptions import (
    InferenceFailedException,
    InferenceNotConfiguredException,
)
from app.domains.waste.scoring.types import Prediction

logger = get_logger(__name__)


class HuggingFaceInferenceClient:
    """Hugging Face Inference API 클라이언트"""

    def __init__(
        self,
        config: Settings = settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            config: 애플리케이션 설정 (토큰, 모델 ID, 타임아웃)
            transport: httpx 전송 계층 (테스트용 MockTransport 주입)
        """
        self.api_token = config.hf_api_token
        self.api_url = config.hf_api_url.rstrip("/")
        self.default_model_id = config.hf_model_id
        self.timeout = config.hf_timeout_seconds
        self.top_k = config.hf_top_k
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_token)

    async def classify_image(
        self,
        image_bytes: bytes,
        mime: str = "image/png",
        model_id: Optional[str] = None,
    ) -> list[Prediction]:
        """이미지 분류

        Args:
            image_bytes: 이미지 바이너리
            mime: 이미지 MIME 타입
            model_id: 모델 ID (None이면 설정 기본값)

        Returns:
            list[Prediction]: 상위 top_k 예측 (확률 높은 순)

        Raises:
            InferenceNotConfiguredException: API 토큰 미설정
            InferenceFailedException: 원격 호출 실패 또는 응답 형식 오류
        """
        if not self.is_configured:
            raise InferenceNotConfiguredException()

        model = model_id or self.default_model_id
        url = f"{self.api_url}/{model}"
        headers = {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": mime,
        }

        with measure_time() as timer:
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout, transport=self.transport
                ) as client:
                    response = await client.post(
                        url, headers=headers, content=image_bytes
                    )
                    response.raise_for_status()
                    data = response.json()

            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Inference HTTP error ({model}): {e.response.status_code}"
                )
                raise InferenceFailedException(
                    model_id=model,
                    detail_msg=e.response.text,
                    status_code=e.response.status_code,
                )
            except httpx.TimeoutException:
                logger.error(f"Inference timeout ({model})")
                raise InferenceFailedException(
                    model_id=model, detail_msg="추론 요청 시간 초과"
                )
            except httpx.HTTPError as e:
                logger.error(f"Inference request failed ({model}): {e}")
                raise InferenceFailedException(model_id=model, detail_msg=str(e))
            except ValueError as e:
                logger.error(f"Invalid inference response ({model}): {e}")
                raise InferenceFailedException(
                    model_id=model, detail_msg="응답이 JSON 형식이 아닙니다."
                )

        predictions = parse_predictions(data)[: self.top_k]
        logger.info(
            f"Inference completed ({model}): {len(predictions)} labels "
            f"in {timer['elapsed_ms']:.2f}ms"
        )
        return predictions


def parse_predictions(data: Any) -> list[Prediction]:
    """추론 응답을 Prediction 목록으로 변환

    배치 형식([[...]])이면 첫 번째 이미지 결과만 사용하고,
    항목이 dict가 아니면 건너뜁니다. 숫자로 읽을 수 없는 score는 0으로 취급합니다.
    결과는 확률 높은 순으로 정렬됩니다.
    """
    if isinstance(data, list) and data and isinstance(data[0], list):
        data = data[0]
    if not isinstance(data, list):
        return []

    predictions = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            prediction = Prediction(
                label=item.get("label"), probability=item.get("score")
            )
        except ValidationError:
            logger.warning(
                "Unreadable inference score",
                extra={"label": item.get("label"), "score": repr(item.get("score"))},
            )
            prediction = Prediction(label=item.get("label"), probability=0.0)
        predictions.append(prediction)
    predictions.sort(key=lambda p: p.probability, reverse=True)
    return predictions


def get_inference_client() -> HuggingFaceInferenceClient:
    """HuggingFaceInferenceClient 의존성"""
    return HuggingFaceInferenceClient(settings)
