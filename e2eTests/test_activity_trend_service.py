from datetime import date, timedelta

import numpy as np
import pytest

from game_activity.analysis.rollup_engine import WEEKDAY_NAMES
from game_activity.core.activity_trend_service import ActivityTrendService
from game_activity.domain.AnalysisIntent import AnalysisIntent
from game_activity.domain.activitySample import ActivitySample
from game_activity.domain.errors import InsufficientDataError, InvalidDateFormatError
from game_activity.infra.csv_sample_reader import CsvSampleReader
from game_activity.main import main

TITLE = "MurderMystery2By@Nikilis"
FIRST_DAY = date(2022, 1, 1)


def generate_declining_activity(days: int, samples_per_day: int = 4) -> list[tuple[str, int]]:
    rng = np.random.default_rng(1337)
    rows = []
    for offset in range(days):
        day = FIRST_DAY + timedelta(days=offset)
        base = 40000 - 150 * offset
        for hour in range(samples_per_day):
            users = int(max(base + rng.normal(0, 500), 0))
            # mix of the two raw formats seen upstream
            if hour % 2:
                raw = f"{day.month:02d}/{day.day:02d}/{day.year} {hour:02d}:00:00"
            else:
                raw = f"{day.isoformat()} {hour:02d}:30:00"
            rows.append((raw, users))
    return rows


def write_dataset(tmp_path, days: int = 120) -> str:
    lines = ["Date,Active Users,Title"]
    for raw, users in generate_declining_activity(days):
        lines.append(f"{raw},{users},{TITLE}")
        lines.append(f"{raw},{users * 3},Brookhaven")
    path = tmp_path / "roblox_games_data.csv"
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def test_full_run_over_csv(tmp_path):
    path = write_dataset(tmp_path)
    intent = AnalysisIntent(title_filter=TITLE.lower(), forecast_start_date="2022-05-03", data_path=path)

    report = ActivityTrendService(intent, source=CsvSampleReader(path)).run()

    assert len(report.daily) == 120
    assert [p.day for p in report.daily] == sorted(p.day for p in report.daily)
    assert set(report.weekday_averages) == set(WEEKDAY_NAMES)
    assert [b.key for b in report.monthly_averages] == ["2022-01", "2022-02", "2022-03", "2022-04"]
    assert report.trend.slope == pytest.approx(-150.0, rel=0.05)
    assert report.trend.intercept == pytest.approx(40000.0, rel=0.02)

    forecast = report.forecast
    assert 0 < forecast.days_until_zero < 365
    assert len(forecast.points) == forecast.days_until_zero
    assert forecast.points[0].day == date(2022, 5, 3)
    assert all(p.predicted > 0 for p in forecast.points)
    assert report.trend.predict(forecast.days_until_zero) <= 0


def test_day_count_is_distinct_days_not_samples():
    samples = [
        ActivitySample(day=raw, active_users=users, title=TITLE)
        for raw, users in generate_declining_activity(10, samples_per_day=6)
    ]
    intent = AnalysisIntent(title_filter=TITLE, forecast_start_date="2022-01-11")

    report = ActivityTrendService(intent).analyze(samples)

    assert len(samples) == 60
    assert len(report.daily) == 10


def test_unknown_title_reports_insufficient_data():
    samples = [ActivitySample(day="2023-01-01", active_users=10, title="Brookhaven")]
    intent = AnalysisIntent(title_filter="Doors", forecast_start_date="2023-01-02")

    with pytest.raises(InsufficientDataError) as err:
        ActivityTrendService(intent).analyze(samples)

    assert err.value.count == 0


def test_unrecognized_date_surfaces_in_rollup():
    samples = [
        ActivitySample(day="2023-01-01", active_users=10, title="Doors"),
        ActivitySample(day="01.02.2023", active_users=20, title="Doors"),
    ]
    intent = AnalysisIntent(title_filter="Doors", forecast_start_date="2023-01-03")

    with pytest.raises(InvalidDateFormatError) as err:
        ActivityTrendService(intent).analyze(samples)

    assert err.value.value == "01.02.2023"


def test_run_without_source():
    intent = AnalysisIntent(title_filter="Doors", forecast_start_date="2023-01-03")

    with pytest.raises(RuntimeError):
        ActivityTrendService(intent).run()


def test_main_prints_report(tmp_path, capsys):
    path = write_dataset(tmp_path, days=30)

    code = main(["--data", path, "--title", "brookhaven", "--start", "2022-01-31"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0].startswith("Date: 2022-01-01, Daily average active Users: ")
    assert out[-1].startswith("It may take ")
    assert any(line.startswith("Linear Regression: y = ") for line in out)


def test_main_reports_failure(tmp_path):
    path = write_dataset(tmp_path, days=5)

    assert main(["--data", path, "--title", "Doors", "--start", "2022-01-06"]) == 1


@pytest.mark.parametrize("content", [
    None,
    "{not json",
    '{"forecast_start_date": "2022-01-06"}',
    '{"title_filter": "Doors", "forecast_start_date": "2022-01-06", "forecast_horizon_days": "soon"}',
])
def test_main_rejects_bad_intent(tmp_path, capsys, content):
    intent_path = tmp_path / "intent.json"
    if content is not None:
        intent_path.write_text(content)

    with pytest.raises(SystemExit) as exc:
        main(["--intent", str(intent_path)])

    assert exc.value.code == 2
    assert "cannot load intent" in capsys.readouterr().err


def test_main_reports_unparseable_csv(tmp_path):
    path = tmp_path / "games.csv"
    path.write_bytes(b"Date,Active Users,Title\n2023-01-01,10,Doors\n2023-01-02,10,Doors,extra\n")

    assert main(["--data", str(path), "--title", "Doors", "--start", "2023-01-03"]) == 1
