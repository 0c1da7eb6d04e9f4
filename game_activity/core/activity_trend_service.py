import logging
from typing import Optional, Sequence

from game_activity.analysis.daily_aggregator import aggregate_daily
from game_activity.analysis.date_normalizer import normalize_sample
from game_activity.analysis.forecaster import Forecaster
from game_activity.analysis.least_squares_fitter import LeastSquaresTrendFitter
from game_activity.analysis.rollup_engine import average_by_month, average_by_weekday
from game_activity.analysis.sample_filter import filter_by_title
from game_activity.domain.AnalysisIntent import AnalysisIntent
from game_activity.domain.activityReport import ActivityReport
from game_activity.domain.activitySample import ActivitySample
from game_activity.domain.trend_fitter import TrendFitter
from game_activity.infra.csv_sample_reader import CsvSampleReader

logger = logging.getLogger(__name__)


class ActivityTrendService:
    """
    Runs one title through the whole pipeline:
    1.  keep only samples whose title matches (case-insensitive),
    2.  cut dates down to a YYYY-MM-DD day key,
    3.  average per day, then per weekday and per month,
    4.  fit a line over the daily series by position,
    5.  walk the line forward from the start date until it drops to zero.
    """

    def __init__(self, intent: AnalysisIntent, source: Optional[CsvSampleReader] = None,
                 fitter: Optional[TrendFitter] = None) -> None:
        self.intent: AnalysisIntent = intent
        self.source: Optional[CsvSampleReader] = source
        self.fitter: TrendFitter = fitter or LeastSquaresTrendFitter()
        self.forecaster: Forecaster = Forecaster(
            horizon_days=intent.forecast_horizon_days,
            zero_threshold=intent.zero_threshold,
        )

    def analyze(self, samples: Sequence[ActivitySample]) -> ActivityReport:
        selected = filter_by_title(samples, self.intent.title_filter)
        logger.info(f"{len(selected)} of {len(samples)} samples match title '{self.intent.title_filter}'")

        for sample in selected:
            normalize_sample(sample)

        daily = aggregate_daily(selected)
        logger.info(f"Aggregated {len(daily)} distinct days")

        weekday = average_by_weekday(daily)
        monthly = average_by_month(daily)
        logger.debug(f"Rollups: {len(weekday)} weekdays, {len(monthly)} months")

        trend = self.fitter.fit(daily)
        logger.info(f"Trend: y = {trend.slope:.2f}x + {trend.intercept:.2f}")

        forecast = self.forecaster.forecast_line(self.intent.forecast_start_date, trend)

        return ActivityReport(
            title=self.intent.title_filter,
            daily=daily,
            weekday_averages=weekday,
            monthly_averages=monthly,
            trend=trend,
            forecast=forecast,
        )

    def run(self) -> ActivityReport:
        if self.source is None:
            raise RuntimeError("No sample source configured")
        return self.analyze(self.source.read_samples())
