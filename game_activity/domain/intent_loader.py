import json

from game_activity.domain.AnalysisIntent import AnalysisIntent

_NUMERIC_FIELDS = {
    'forecast_horizon_days': int,
    'zero_threshold': float,
}


def _coerce(key: str, value):
    try:
        return _NUMERIC_FIELDS[key](value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Intent field '{key}' must be numeric, got {value!r}") from exc


def load_intent(path: str) -> AnalysisIntent:
    with open(path, 'r') as f:
        data = json.load(f)

    optional = {
        key: data[key]
        for key in (
            'data_path',
            'date_column',
            'users_column',
            'title_column',
        )
        if key in data
    }
    optional.update({
        key: _coerce(key, data[key])
        for key in _NUMERIC_FIELDS
        if key in data
    })

    return AnalysisIntent(
        title_filter=data['title_filter'],
        forecast_start_date=data['forecast_start_date'],
        **optional
    )
