import logging
from typing import Sequence

import numpy as np

from game_activity.domain.dailyPoint import DailyPoint
from game_activity.domain.errors import InsufficientDataError
from game_activity.domain.trendLine import TrendLine
from game_activity.domain.trend_fitter import TrendFitter

logger = logging.getLogger(__name__)

MIN_POINTS_FOR_FIT = 2


class LeastSquaresTrendFitter(TrendFitter):
    """
    Ordinary least squares over the sorted daily series.

    x is the position of each point in the series (0..n-1), not the number of
    calendar days elapsed, so missing days shorten the axis.
    """

    def fit(self, series: Sequence[DailyPoint]) -> TrendLine:
        n = len(series)
        if n < MIN_POINTS_FOR_FIT:
            raise InsufficientDataError(n, MIN_POINTS_FOR_FIT)

        x = np.arange(n, dtype=float)
        y = np.array([p.average for p in series], dtype=float)

        sum_x = x.sum()
        sum_y = y.sum()
        sum_xx = (x * x).sum()
        sum_xy = (x * y).sum()

        slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
        intercept = (sum_y - slope * sum_x) / n

        logger.debug(f"Fitted trend over {n} points: slope={slope:.4f}, intercept={intercept:.4f}")
        return TrendLine(slope=float(slope), intercept=float(intercept))
