from typing import Dict, Iterable, List, Tuple

from game_activity.domain.activitySample import ActivitySample
from game_activity.domain.dailyPoint import DailyPoint


def aggregate_daily(samples: Iterable[ActivitySample]) -> List[DailyPoint]:
    """
    Averages active users per day key, sorted ascending by day.
    Days with no samples are not filled in.
    """
    combined: Dict[str, Tuple[int, int]] = {}
    for sample in samples:
        total, count = combined.get(sample.day, (0, 0))
        combined[sample.day] = (total + sample.active_users, count + 1)

    return [
        DailyPoint(day=day, average=total / count)
        for day, (total, count) in sorted(combined.items())
    ]
