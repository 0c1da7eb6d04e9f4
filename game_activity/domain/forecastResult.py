from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class ForecastPoint:
    day: date
    predicted: float


@dataclass
class Forecast:
    points: List[ForecastPoint] = field(default_factory=list)
    days_until_zero: int = 0

    @property
    def last_point(self) -> Optional[ForecastPoint]:
        return self.points[-1] if self.points else None
