from dataclasses import dataclass


@dataclass
class ActivitySample:
    day: str
    active_users: int
    title: str
