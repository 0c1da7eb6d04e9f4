from datetime import date, datetime

from game_activity.domain.activitySample import ActivitySample
from game_activity.domain.errors import InvalidDateFormatError

CANONICAL_FORMAT = "%Y-%m-%d"
US_FORMAT = "%m/%d/%Y"


def normalize_date(raw: str) -> str:
    """
    Reduces a raw date field to a YYYY-MM-DD day key.

    Time of day is dropped first, then MM/DD/YYYY is rewritten. Anything that
    does not parse as MM/DD/YYYY is returned as-is.
    """
    day = raw.split(" ", 1)[0]
    try:
        parsed = datetime.strptime(day, US_FORMAT)
    except ValueError:
        return day
    return parsed.strftime(CANONICAL_FORMAT)


def normalize_sample(sample: ActivitySample) -> ActivitySample:
    sample.day = normalize_date(sample.day)
    return sample


def parse_day(day: str) -> date:
    try:
        return datetime.strptime(day, CANONICAL_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateFormatError(day) from exc
