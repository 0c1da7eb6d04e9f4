from dataclasses import dataclass


@dataclass(frozen=True)
class TrendLine:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept
