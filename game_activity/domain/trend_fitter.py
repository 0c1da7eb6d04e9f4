from abc import ABC, abstractmethod
from typing import Sequence

from game_activity.domain.dailyPoint import DailyPoint
from game_activity.domain.trendLine import TrendLine


class TrendFitter(ABC):
    @abstractmethod
    def fit(self, series: Sequence[DailyPoint]) -> TrendLine:
        pass
