"""분류 이력 모듈"""

from app.domains.waste.history.service import HistoryService
from app.domains.waste.history.stats import compute_statistics
from app.domains.waste.history.types import ClassificationStats

__all__ = ["HistoryService", "ClassificationStats", "compute_statistics"]
