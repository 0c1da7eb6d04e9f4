from typing import List

from game_activity.analysis.rollup_engine import WEEKDAY_NAMES
from game_activity.domain.activityReport import ActivityReport


def render_report(report: ActivityReport) -> List[str]:
    lines: List[str] = []

    for point in report.daily:
        lines.append(f"Date: {point.day}, Daily average active Users: {point.average}")

    for weekday in WEEKDAY_NAMES:
        if weekday in report.weekday_averages:
            lines.append(f"{weekday}: {report.weekday_averages[weekday]:.2f}")

    for bucket in report.monthly_averages:
        lines.append(f"{bucket.key}: {bucket.average:.2f}")

    lines.append(f"Linear Regression: y = {report.trend.slope:.2f}x + {report.trend.intercept:.2f}")

    for point in report.forecast.points:
        lines.append(
            f"Date: {point.day.isoformat()}, "
            f"Predicted daily average active users: {point.predicted:.2f}"
        )
    lines.append(f"It may take {report.forecast.days_until_zero} days for the game to die.")
    return lines


def print_report(report: ActivityReport) -> None:
    for line in render_report(report):
        print(line)
