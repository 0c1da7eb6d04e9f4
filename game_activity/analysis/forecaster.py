import logging
from datetime import date, timedelta
from typing import Union

from game_activity.analysis.date_normalizer import parse_day
from game_activity.domain.forecastResult import Forecast, ForecastPoint
from game_activity.domain.trendLine import TrendLine

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 365
DEFAULT_ZERO_THRESHOLD = 0.0


class Forecaster:
    def __init__(
            self,
            horizon_days: int = DEFAULT_HORIZON_DAYS,
            zero_threshold: float = DEFAULT_ZERO_THRESHOLD
    ):
        if horizon_days < 0:
            raise ValueError(f"horizon_days must be >= 0, got {horizon_days}")
        self.horizon_days = horizon_days
        self.zero_threshold = zero_threshold

    def forecast(self, start_date: Union[date, str], slope: float, intercept: float) -> Forecast:
        """
        Walks the line forward one day at a time from start_date.

        Stops before appending the first projection <= zero_threshold, or once
        horizon_days points exist. days_until_zero == len(points).
        """
        start = parse_day(start_date) if isinstance(start_date, str) else start_date

        points = []
        day = 0
        predicted = slope * day + intercept
        while predicted > self.zero_threshold and day < self.horizon_days:
            points.append(ForecastPoint(day=start + timedelta(days=day), predicted=predicted))
            day += 1
            predicted = slope * day + intercept

        if day >= self.horizon_days:
            logger.info(f"Forecast reached the {self.horizon_days}-day cap without hitting zero")
        else:
            logger.info(f"Forecast reaches zero after {day} days from {start.isoformat()}")

        return Forecast(points=points, days_until_zero=day)

    def forecast_line(self, start_date: Union[date, str], trend: TrendLine) -> Forecast:
        return self.forecast(start_date, trend.slope, trend.intercept)
