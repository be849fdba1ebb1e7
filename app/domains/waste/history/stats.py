"""분류 이력 통계 계산

DB 조회 결과(ClassificationRecord 목록)로 통계를 계산하는 순수 함수 모음입니다.
"""

from collections import Counter
from datetime import datetime, timedelta
from typing import Optional, Sequence

from app.core.utils.datetime import (
    UTC,
    days_ago,
    end_of_day,
    now_utc,
    start_of_day,
)
from app.domains.waste.history.types import (
    ClassificationStats,
    EnvironmentalImpact,
    TopItem,
    WeeklyStat,
)
from app.domains.waste.models import ClassificationRecord
from app.domains.waste.scoring.types import Category

TOP_ITEMS_LIMIT = 10
WEEKLY_STATS_WEEKS = 4

# 품목 1개당 평균 무게(kg)와 kg당 CO₂ 절감 계수
RECYCLED_ITEM_KG = 0.2
RECYCLED_CO2_PER_KG = 2.5
COMPOSTED_ITEM_KG = 0.15
COMPOSTED_CO2_PER_KG = 1.2


def compute_statistics(
    records: Sequence[ClassificationRecord],
    now: Optional[datetime] = None,
) -> ClassificationStats:
    """분류 이력 통계 계산

    Args:
        records: 사용자 분류 이력
        now: 기준 시각 (주간 통계용, 기본: 현재 UTC)

    Returns:
        ClassificationStats: 통계 결과 (이력이 없으면 0으로 채운 통계)
    """
    if not records:
        return ClassificationStats()

    return ClassificationStats(
        total_classifications=len(records),
        total_points=sum(r.eco_points for r in records),
        category_breakdown=dict(Counter(r.category for r in records)),
        top_items=_top_items(records),
        weekly_stats=_weekly_stats(records, _aware(now or now_utc())),
        environmental_impact=_environmental_impact(records),
    )


def _top_items(records: Sequence[ClassificationRecord]) -> list[TopItem]:
    counts: dict[str, list[int]] = {}
    for record in records:
        entry = counts.setdefault(record.label, [0, 0])
        entry[0] += 1
        entry[1] += record.eco_points

    items = [
        TopItem(item=label, count=count, total_points=points)
        for label, (count, points) in counts.items()
    ]
    items.sort(key=lambda item: item.count, reverse=True)
    return items[:TOP_ITEMS_LIMIT]


def _weekly_stats(
    records: Sequence[ClassificationRecord], now: datetime
) -> list[WeeklyStat]:
    stats = []
    for i in range(WEEKLY_STATS_WEEKS - 1, -1, -1):
        week_start = start_of_day(days_ago(i * 7 + 6, now))
        week_end = end_of_day(week_start + timedelta(days=6))

        week_records = [
            r for r in records if week_start <= _aware(r.created_at) <= week_end
        ]
        stats.append(
            WeeklyStat(
                date=week_start.date().isoformat(),
                count=len(week_records),
                points=sum(r.eco_points for r in week_records),
            )
        )
    return stats


def _environmental_impact(
    records: Sequence[ClassificationRecord],
) -> EnvironmentalImpact:
    items_recycled = 0
    items_composted = 0
    waste_reduced = 0.0
    co2_saved = 0.0

    for record in records:
        if record.category == Category.RECYCLABLE.value:
            items_recycled += 1
            waste_reduced += RECYCLED_ITEM_KG
            co2_saved += RECYCLED_ITEM_KG * RECYCLED_CO2_PER_KG
        elif record.category == Category.ORGANIC.value:
            items_composted += 1
            waste_reduced += COMPOSTED_ITEM_KG
            co2_saved += COMPOSTED_ITEM_KG * COMPOSTED_CO2_PER_KG

    return EnvironmentalImpact(
        items_recycled=items_recycled,
        items_composted=items_composted,
        waste_reduced=round(waste_reduced, 2),
        co2_saved=round(co2_saved, 2),
    )


def _aware(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt
