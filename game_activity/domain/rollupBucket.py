from dataclasses import dataclass


@dataclass(frozen=True)
class RollupBucket:
    key: str
    average: float
