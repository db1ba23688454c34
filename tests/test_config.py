from skytrack.config import Settings, _get_float


def test_get_float_reads_environment(monkeypatch):
    monkeypatch.setenv("SKYTRACK_FREQUENCY", "12.5")

    assert _get_float("SKYTRACK_FREQUENCY", 5.0) == 12.5


def test_get_float_falls_back_on_bad_value(monkeypatch):
    monkeypatch.setenv("SKYTRACK_FREQUENCY", "often")

    assert _get_float("SKYTRACK_FREQUENCY", 5.0) == 5.0


def test_settings_bound_box_uses_configured_area():
    config = Settings(min_latitude=1.0, max_latitude=2.0, min_longitude=3.0, max_longitude=4.0)

    box = config.bound_box()

    assert (box.min_latitude, box.max_latitude, box.min_longitude, box.max_longitude) == (
        1.0,
        2.0,
        3.0,
        4.0,
    )
