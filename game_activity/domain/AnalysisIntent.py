from dataclasses import dataclass


@dataclass
class AnalysisIntent:
    title_filter: str
    forecast_start_date: str
    data_path: str = "roblox_games_data.csv"
    forecast_horizon_days: int = 365
    zero_threshold: float = 0.0
    date_column: str = "Date"
    users_column: str = "Active Users"
    title_column: str = "Title"


"""
{
  "title_filter": "MurderMystery2By@Nikilis",
  "forecast_start_date": "2022-05-03",
  "data_path": "roblox_games_data.csv",
  "forecast_horizon_days": 365
}
"""
