import argparse
import logging
import sys

from game_activity.core.activity_trend_service import ActivityTrendService
from game_activity.domain.AnalysisIntent import AnalysisIntent
from game_activity.domain.errors import ActivityAnalysisError
from game_activity.domain.intent_loader import load_intent
from game_activity.infra.console_report import print_report
from game_activity.infra.csv_sample_reader import CsvSampleReader

logger = logging.getLogger(__name__)


def _build_intent(parser: argparse.ArgumentParser, args: argparse.Namespace) -> AnalysisIntent:
    if args.intent:
        try:
            intent = load_intent(args.intent)
        except (OSError, ValueError, KeyError) as exc:
            parser.error(f"cannot load intent {args.intent}: {exc}")
    else:
        if not args.title or not args.start:
            parser.error("--title and --start are required when no --intent file is given")
        intent = AnalysisIntent(title_filter=args.title, forecast_start_date=args.start)

    if args.title:
        intent.title_filter = args.title
    if args.start:
        intent.forecast_start_date = args.start
    if args.data:
        intent.data_path = args.data
    return intent


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    parser = argparse.ArgumentParser(description="Daily activity trend and forecast for one game title")
    parser.add_argument("--intent", help="JSON file with analysis settings")
    parser.add_argument("--data", help="CSV file with Date, Active Users and Title columns")
    parser.add_argument("--title", help="game title to analyze (case-insensitive)")
    parser.add_argument("--start", help="forecast start date, YYYY-MM-DD")
    args = parser.parse_args(argv)

    # --- Load Intent ---
    intent = _build_intent(parser, args)

    # --- Infrastructure ---
    reader = CsvSampleReader(
        intent.data_path,
        date_column=intent.date_column,
        users_column=intent.users_column,
        title_column=intent.title_column,
    )

    service = ActivityTrendService(intent=intent, source=reader)

    try:
        report = service.run()
    except ActivityAnalysisError as exc:
        logger.error(f"Analysis failed: {exc}")
        return 1

    print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
