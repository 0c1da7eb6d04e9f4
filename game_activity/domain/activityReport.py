from dataclasses import dataclass
from typing import Dict, List

from game_activity.domain.dailyPoint import DailyPoint
from game_activity.domain.forecastResult import Forecast
from game_activity.domain.rollupBucket import RollupBucket
from game_activity.domain.trendLine import TrendLine


@dataclass
class ActivityReport:
    title: str
    daily: List[DailyPoint]
    weekday_averages: Dict[str, float]
    monthly_averages: List[RollupBucket]
    trend: TrendLine
    forecast: Forecast
