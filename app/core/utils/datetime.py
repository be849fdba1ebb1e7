"""날짜/시간 유틸리티"""

from datetime import datetime, timedelta, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def start_of_day(dt: Optional[datetime] = None) -> datetime:
    """해당 날짜의 시작 시간 (00:00:00)"""
    if dt is None:
        dt = now_utc()
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: Optional[datetime] = None) -> datetime:
    """해당 날짜의 종료 시간 (23:59:59.999999)"""
    if dt is None:
        dt = now_utc()
    return dt.replace(hour=23, minute=59, second=59, microsecond=999999)


def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
    """n일 전 시간 반환"""
    return (now or now_utc()) - timedelta(days=days)
