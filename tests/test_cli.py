import pytest

from skytrack import cli
from skytrack.config import settings


def test_build_parser_defaults_come_from_settings():
    args = cli.build_parser().parse_args(["track"])

    assert args.min_latitude == settings.min_latitude
    assert args.max_longitude == settings.max_longitude
    assert args.frequency == settings.frequency
    assert args.iterations is None


def test_track_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_track_exits_with_error_for_invalid_area(monkeypatch):
    def fail_run(*args, **kwargs):  # pragma: no cover - must not be reached
        raise AssertionError("tracker should not run")

    monkeypatch.setattr(cli.asyncio, "run", fail_run)

    code = cli.main(["track", "--min-longitude", "10", "--max-longitude", "10"])

    assert code == 2


def test_track_runs_tracker_with_flags(monkeypatch):
    captured = {}

    class FakeTracker:
        def __init__(self, *, box, frequency):
            captured["box"] = box
            captured["frequency"] = frequency

        async def run(self, iterations=None):
            captured["iterations"] = iterations

    monkeypatch.setattr(cli, "FlightTracker", FakeTracker)

    code = cli.main(
        [
            "track",
            "--min-latitude",
            "45.8",
            "--max-latitude",
            "47.8",
            "--min-longitude",
            "5.9",
            "--max-longitude",
            "10.5",
            "--frequency",
            "2",
            "--iterations",
            "1",
        ]
    )

    assert code == 0
    assert captured["box"].min_latitude == 45.8
    assert captured["box"].max_longitude == 10.5
    assert captured["frequency"] == 2.0
    assert captured["iterations"] == 1
