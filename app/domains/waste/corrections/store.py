"""로컬 라벨 보정 저장소

단일 사용자 환경(스크립트, 로컬 실행)에서 사용하는 파일 기반 key-value 저장소입니다.
`eco-waste-label-map-v1` 키 아래에 소문자 라벨 → 카테고리 JSON 객체를 저장합니다.

- 최초 사용 시 로드하고 메모리에 캐싱
- 보정할 때마다 즉시 파일에 기록 (write-through)
- 만료/삭제 정책 없음, 동시 쓰기 시 마지막 쓰기 우선
- 읽기/쓰기 실패는 경고 로그만 남기고 무시 (보정 없음으로 동작)
"""

import json
import os
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

from app.core.config import settings
from app.core.logging import get_logger
from app.domains.waste.scoring.types import Category

logger = get_logger(__name__)

STORAGE_KEY = "eco-waste-label-map-v1"


class LabelCorrectionStore:
    """파일 기반 라벨 보정 저장소"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._document: Optional[dict[str, Any]] = None
        self._corrections: Optional[dict[str, Category]] = None

    def get_map(self) -> dict[str, Category]:
        """라벨 보정 맵 조회 (복사본)"""
        return dict(self._load())

    def record(self, label: str, category: Union[Category, str]) -> None:
        """라벨 보정 기록 (같은 라벨은 덮어씀)

        Args:
            label: 모델 라벨 (대소문자 무관)
            category: 보정 카테고리

        Raises:
            ValueError: 지원하지 않는 카테고리인 경우
        """
        category = Category(category)
        corrections = self._load()
        corrections[label.lower()] = category
        self._save()

        logger.info(
            "Label correction recorded",
            extra={"label": label.lower(), "category": category.value},
        )

    def remove(self, label: str) -> bool:
        """라벨 보정 삭제

        Returns:
            bool: 삭제 여부 (존재하지 않으면 False)
        """
        corrections = self._load()
        if corrections.pop(label.lower(), None) is None:
            return False
        self._save()
        return True

    def clear(self) -> None:
        """모든 라벨 보정 삭제"""
        self._load().clear()
        self._save()

    def _load(self) -> dict[str, Category]:
        if self._corrections is None:
            self._document = self._read_document()
            self._corrections = _parse_corrections(
                self._document.get(STORAGE_KEY)
            )
        return self._corrections

    def _read_document(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning(f"Failed to read label map from {self.path}: {e}")
            return {}

        try:
            document = json.loads(raw or "{}")
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupted label map at {self.path}: {e}")
            return {}

        if not isinstance(document, dict):
            logger.warning(f"Unexpected label map format at {self.path}")
            return {}
        return document

    def _save(self) -> None:
        document = dict(self._document or {})
        document[STORAGE_KEY] = {
            label: category.value
            for label, category in (self._corrections or {}).items()
        }
        self._document = document

        tmp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=".label-map-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logger.warning(f"Failed to write label map to {self.path}: {e}")
        finally:
            # replace가 실패하면 임시 파일 정리
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)


def _parse_corrections(value: Any) -> dict[str, Category]:
    """저장된 JSON 객체를 보정 맵으로 변환 (잘못된 항목은 무시)"""
    if not isinstance(value, dict):
        return {}

    corrections: dict[str, Category] = {}
    for label, category in value.items():
        try:
            corrections[str(label).lower()] = Category(category)
        except ValueError:
            logger.warning(
                f"Ignoring label correction with unknown category: "
                f"{label!r} → {category!r}"
            )
    return corrections


@lru_cache
def get_local_store() -> LabelCorrectionStore:
    """설정 경로의 로컬 보정 저장소 반환 (캐싱됨)"""
    return LabelCorrectionStore(settings.label_map_path)


def record_user_correction(
    label: str,
    category: Union[Category, str],
    store: Optional[LabelCorrectionStore] = None,
) -> None:
    """라벨 보정을 로컬 저장소에 기록

    이후 같은 라벨(대소문자 무관, 정확히 일치)의 점수 계산에 반영됩니다.
    """
    (store or get_local_store()).record(label, category)
