from typing import Callable, Dict, List, Sequence, Tuple

from game_activity.analysis.date_normalizer import parse_day
from game_activity.domain.dailyPoint import DailyPoint
from game_activity.domain.rollupBucket import RollupBucket

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def weekday_name(day: str) -> str:
    return WEEKDAY_NAMES[parse_day(day).weekday()]


def month_key(day: str) -> str:
    return parse_day(day).strftime("%Y-%m")


def _average_by(series: Sequence[DailyPoint], key_for: Callable[[str], str]) -> Dict[str, float]:
    sums: Dict[str, Tuple[float, int]] = {}
    for point in series:
        key = key_for(point.day)
        total, count = sums.get(key, (0.0, 0))
        sums[key] = (total + point.average, count + 1)
    return {key: total / count for key, (total, count) in sums.items()}


def average_by_weekday(series: Sequence[DailyPoint]) -> Dict[str, float]:
    """Mean of the daily averages per weekday name. Key order carries no meaning."""
    return _average_by(series, weekday_name)


def average_by_month(series: Sequence[DailyPoint]) -> List[RollupBucket]:
    """Mean of the daily averages per YYYY-MM, ascending by month."""
    averages = _average_by(series, month_key)
    return [RollupBucket(key=month, average=averages[month]) for month in sorted(averages)]
