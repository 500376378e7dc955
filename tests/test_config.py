import pytest

from flight_analytics.config import Settings, get_data_paths, get_paths, load_settings


def test_load_settings_defaults(monkeypatch):
    for var in ("FLIGHT_HUB", "FLIGHT_MIN_SHARED", "FLIGHT_TOP_N", "FLIGHT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert load_settings() == Settings()


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("FLIGHT_HUB", "fr")
    monkeypatch.setenv("FLIGHT_MIN_SHARED", "5")
    monkeypatch.setenv("FLIGHT_TOP_N", "0")
    s = load_settings()
    assert (s.hub, s.min_shared, s.top_n) == ("fr", 5, 0)


def test_load_settings_rejects_bad_int(monkeypatch):
    monkeypatch.setenv("FLIGHT_MIN_SHARED", "three")
    with pytest.raises(ValueError, match="FLIGHT_MIN_SHARED"):
        load_settings()


def test_data_paths_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FLIGHT_DATA_PATH", str(tmp_path / "f.csv"))
    monkeypatch.setenv("PASSENGER_DATA_PATH", str(tmp_path / "p.csv"))
    assert get_data_paths() == (tmp_path / "f.csv", tmp_path / "p.csv")


def test_get_paths_creates_output_dirs(tmp_path):
    paths = get_paths(outputs=tmp_path / "out")
    assert paths.tables.is_dir()
    assert paths.figures.is_dir()


def test_explicit_values_skip_malformed_env(monkeypatch):
    monkeypatch.setenv("FLIGHT_MIN_SHARED", "three")
    monkeypatch.setenv("FLIGHT_TOP_N", "ten")
    s = load_settings(min_shared=4, top_n=20)
    assert (s.min_shared, s.top_n) == (4, 20)
