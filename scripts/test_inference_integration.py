"""이미지 분류 모델 통합 테스트 스크립트

실제 Hugging Face Inference API를 호출하여 추론 → 카테고리 매핑이 정상 작동하는지 검증합니다.
HF_API_TOKEN 환경변수가 필요합니다.

Usage:
    python scripts/test_inference_integration.py path/to/image.jpg
"""

import asyncio
import mimetypes
import sys
from pathlib import Path

from app.core.config import settings
from app.core.logging import setup_logging
from app.domains.ai.exceptions import (
    InferenceFailedException,
    InferenceNotConfiguredException,
)
from app.domains.ai.inference import HuggingFaceInferenceClient
from app.domains.waste.rewards import calculate_eco_points, confidence_to_percent
from app.domains.waste.scoring import score_from_predictions


async def run(image_path: Path) -> bool:
    print("\n" + "=" * 60)
    print(f"[추론] {settings.hf_model_id}")
    print("=" * 60)

    mime = mimetypes.guess_type(image_path.name)[0] or "image/png"
    client = HuggingFaceInferenceClient(settings)

    try:
        predictions = await client.classify_image(
            image_path.read_bytes(), mime=mime
        )
    except InferenceNotConfiguredException:
        print("\n❌ HF_API_TOKEN이 설정되지 않았습니다.")
        return False
    except InferenceFailedException as e:
        print(f"\n❌ 추론 실패: {e.detail_info}")
        return False

    print("\n✅ 추론 성공!")
    for pred in predictions:
        print(f"  {pred.label:<40} {pred.probability:.4f}")

    result = score_from_predictions(predictions)
    points = calculate_eco_points(
        result.category, confidence_to_percent(result.confidence)
    )
    print(f"\n  카테고리: {result.category.value}")
    print(f"  신뢰도  : {result.confidence:.3f}")
    print(f"  포인트  : {points}")
    return True


def main() -> int:
    setup_logging()
    if len(sys.argv) != 2:
        print(__doc__)
        return 1

    image_path = Path(sys.argv[1])
    if not image_path.is_file():
        print(f"❌ 파일을 찾을 수 없습니다: {image_path}")
        return 1

    return 0 if asyncio.run(run(image_path)) else 1


if __name__ == "__main__":
    sys.exit(main())
