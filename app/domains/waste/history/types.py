"""분류 이력 통계 타입 정의"""

from pydantic import Field

from app.core.schemas import CamelSchema


class TopItem(CamelSchema):
    """자주 분류한 품목"""

    item: str
    count: int
    total_points: int


class WeeklyStat(CamelSchema):
    """주간 분류 통계

    Attributes:
        date: 주 시작일 (YYYY-MM-DD)
        count: 분류 횟수
        points: 획득 포인트
    """

    date: str
    count: int
    points: int


class EnvironmentalImpact(CamelSchema):
    """환경 영향 추정치

    Attributes:
        items_recycled: 재활용 품목 수
        items_composted: 퇴비화 품목 수
        waste_reduced: 매립 감소량 (kg)
        co2_saved: CO₂ 절감량 (kg)
    """

    items_recycled: int = 0
    items_composted: int = 0
    waste_reduced: float = 0.0
    co2_saved: float = 0.0


class ClassificationStats(CamelSchema):
    """사용자 분류 통계"""

    total_classifications: int = 0
    total_points: int = 0
    category_breakdown: dict[str, int] = Field(default_factory=dict)
    top_items: list[TopItem] = Field(default_factory=list)
    weekly_stats: list[WeeklyStat] = Field(default_factory=list)
    environmental_impact: EnvironmentalImpact = Field(
        default_factory=EnvironmentalImpact
    )
