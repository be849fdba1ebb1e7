"""라벨 보정 모듈

- store.py: 로컬 파일 기반 보정 저장소 (단일 사용자)
- repository.py / service.py: 사용자별 보정 (DB)
"""

from app.domains.waste.corrections.service import CorrectionService
from app.domains.waste.corrections.store import (
    STORAGE_KEY,
    LabelCorrectionStore,
    get_local_store,
    record_user_correction,
)

__all__ = [
    "CorrectionService",
    "LabelCorrectionStore",
    "STORAGE_KEY",
    "get_local_store",
    "record_user_correction",
]
