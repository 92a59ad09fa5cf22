import pandas as pd
import pytest

from vertical_dashboards.config import Settings
from vertical_dashboards.data.loader import _normalize_readings, load_metric_readings, readings_for_vertical
from vertical_dashboards.data.results import Err, Ok


def test_unconfigured_sheet_is_an_error_result():
    result = load_metric_readings(Settings())
    assert isinstance(result, Err)
    assert "SPREADSHEET_ID" in result.reason
    assert result.fallback.empty


def test_missing_credentials_file(tmp_path):
    settings = Settings(spreadsheet_id="sheet", credentials=str(tmp_path / "missing.json"))
    result = load_metric_readings(settings)
    assert isinstance(result, Err)
    assert "missing.json" in result.reason


def test_normalize_readings_drops_unusable_rows():
    raw = pd.DataFrame(
        {
            "Vertical_ID": ["energy", "energy", "N/A", "energy"],
            "Metric_ID": ["grid-reliability", "renewable-mix", "grid-reliability", "grid-reliability"],
            "Timestamp": ["2024-03-01", "2024-03-01", "2024-03-02", "not a date"],
            "Value": ["97.5", "31", "90", "88"],
        }
    )
    df = _normalize_readings(raw)
    assert len(df) == 2
    assert df.attrs["dropped_rows"] == 2
    assert df["value"].tolist() == [97.5, 31.0]


def test_normalize_readings_requires_columns():
    with pytest.raises(ValueError):
        _normalize_readings(pd.DataFrame({"metric_id": ["x"], "value": [1]}))


def test_readings_for_vertical_uses_live_rows(registry):
    energy = registry.lookup("energy")
    live = pd.DataFrame(
        {
            "vertical_id": ["Energy", "retail"],
            "metric_id": ["grid-reliability", "conversion-rate"],
            "timestamp": pd.to_datetime(["2024-03-01", "2024-03-01"], utc=True),
            "value": [97.0, 3.1],
        }
    )
    result = readings_for_vertical(Ok(live), energy)
    assert isinstance(result, Ok)
    assert result.value["metric_id"].tolist() == ["grid-reliability"]


def test_readings_for_vertical_falls_back_to_generated(registry):
    energy = registry.lookup("energy")
    result = readings_for_vertical(Err("offline", pd.DataFrame()), energy, days=5, seed=1)
    assert isinstance(result, Err)
    assert result.reason == "offline"
    assert len(result.fallback) == 5 * len(energy.metrics)


def test_readings_for_vertical_without_matching_live_rows(registry):
    energy = registry.lookup("energy")
    live = pd.DataFrame(
        {
            "vertical_id": ["retail"],
            "metric_id": ["conversion-rate"],
            "timestamp": pd.to_datetime(["2024-03-01"], utc=True),
            "value": [3.1],
        }
    )
    result = readings_for_vertical(Ok(live), energy, days=3, seed=1)
    assert isinstance(result, Err)
    assert "energy" in result.reason
