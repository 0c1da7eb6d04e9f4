from dataclasses import dataclass


@dataclass(frozen=True)
class DailyPoint:
    day: str
    average: float
