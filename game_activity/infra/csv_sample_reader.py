from __future__ import annotations

import logging
from typing import Final

import pandas as pd

from game_activity.analysis.date_normalizer import normalize_sample
from game_activity.domain.activitySample import ActivitySample
from game_activity.domain.errors import SampleSourceError

logger = logging.getLogger(__name__)


class CsvSampleReader:
    _DELIMITER: Final[str] = ","

    def __init__(
            self,
            path: str,
            date_column: str = "Date",
            users_column: str = "Active Users",
            title_column: str = "Title",
    ) -> None:
        self.path = path
        self.date_column = date_column
        self.users_column = users_column
        self.title_column = title_column

    def read_samples(self) -> list[ActivitySample]:
        try:
            frame = pd.read_csv(
                self.path,
                sep=self._DELIMITER,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            )
        except FileNotFoundError as exc:
            raise SampleSourceError(f"Sample file not found: {self.path}", self.path) from exc
        except pd.errors.EmptyDataError as exc:
            raise SampleSourceError(f"Sample file is empty: {self.path}", self.path) from exc
        except (pd.errors.ParserError, UnicodeDecodeError) as exc:
            raise SampleSourceError(f"Cannot parse {self.path}: {exc}", self.path) from exc

        for column in (self.date_column, self.users_column, self.title_column):
            if column not in frame.columns:
                raise SampleSourceError(f"Column '{column}' not found in {self.path}", column)

        samples: list[ActivitySample] = []
        rows = zip(frame[self.date_column], frame[self.users_column], frame[self.title_column])
        # header is line 1
        for line, (raw_date, raw_users, title) in enumerate(rows, start=2):
            sample = ActivitySample(
                day=self._required(raw_date, self.date_column, line),
                active_users=self._parse_users(raw_users, line),
                title=self._required(title, self.title_column, line),
            )
            samples.append(normalize_sample(sample))

        logger.info(f"Read {len(samples)} samples from {self.path}")
        return samples

    @staticmethod
    def _required(value: str, column: str, line: int) -> str:
        value = value.strip()
        if not value:
            raise SampleSourceError(f"Missing '{column}' value on line {line}", column)
        return value

    def _parse_users(self, raw: str, line: int) -> int:
        value = self._required(raw, self.users_column, line)
        try:
            users = int(value)
        except ValueError as exc:
            raise SampleSourceError(
                f"Invalid '{self.users_column}' value {value!r} on line {line}", value
            ) from exc
        if users < 0:
            raise SampleSourceError(
                f"Negative '{self.users_column}' value {value!r} on line {line}", value
            )
        return users
