"""요청 ID 컨텍스트

요청마다 발급한 ID를 contextvars에 보관해 서비스 계층 로그에 함께 남깁니다.
"""

import contextvars
import uuid
from typing import Optional

_request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID (요청 컨텍스트 밖에서는 None)"""
    return _request_id.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID 설정 (비어 있으면 UUID4 발급)"""
    request_id = request_id or uuid.uuid4().hex
    _request_id.set(request_id)
    return request_id
