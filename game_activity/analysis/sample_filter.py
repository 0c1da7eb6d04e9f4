from typing import Iterable, List

from game_activity.domain.activitySample import ActivitySample


def filter_by_title(samples: Iterable[ActivitySample], title: str) -> List[ActivitySample]:
    wanted = title.lower()
    return [s for s in samples if s.title.lower() == wanted]
