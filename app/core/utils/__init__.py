"""유틸리티 모듈"""

from app.core.utils.datetime import (
    UTC,
    days_ago,
    end_of_day,
    now_utc,
    start_of_day,
)
from app.core.utils.pagination import PageParams
from app.core.utils.time import measure_time

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "start_of_day",
    "end_of_day",
    "days_ago",
    # pagination
    "PageParams",
    # time measurement
    "measure_time",
]
