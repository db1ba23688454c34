from datetime import datetime, timezone

from skytrack.domain.position_sources import PositionSource
from skytrack.models.air_traffic import State, StateResponse
from skytrack.services.presenter import render_response, render_state


def make_state(**overrides):
    values = {
        "icao24": "7c7f38",
        "callsign": "ZEY     ",
        "origin_country": "Australia",
        "time_position": None,
        "last_contact": datetime(2022, 1, 31, 10, 12, 28, tzinfo=timezone.utc),
        "longitude": 144.7732,
        "latitude": -37.9141,
        "on_ground": False,
        "sensors": [1433, 1532],
        "spi": False,
        "position_source": PositionSource.FLARM,
    }
    values.update(overrides)
    return State(**values)


def test_render_state_exposes_every_field():
    line = render_state(make_state())
    columns = line.split("\t")

    assert len(columns) == 17
    assert "ICAO24: 7c7f38" in columns
    assert "TimePosition: -" in columns
    assert "LastContact: 2022-01-31T10:12:28+00:00" in columns
    assert "Sensors: [1433,1532]" in columns
    assert "PositionSource: FLARM" in columns


def test_render_state_marks_unknown_position_source():
    line = render_state(make_state(position_source=PositionSource.UNKNOWN))

    assert "PositionSource: -" in line.split("\t")


def test_render_response_header():
    response = StateResponse(
        time=datetime(2022, 1, 31, 10, 12, 29, tzinfo=timezone.utc),
        states=[make_state(), make_state(icao24="7c6b2d")],
    )

    lines = render_response(response).splitlines()

    assert lines[0] == "Got 2 records."
    assert lines[1] == "Time: 2022-01-31T10:12:29+00:00"
    assert len(lines) == 4


def test_render_state_distinguishes_empty_sensors_from_missing():
    empty = render_state(make_state(sensors=[])).split("\t")
    missing = render_state(make_state(sensors=None)).split("\t")

    assert "Sensors: []" in empty
    assert "Sensors: -" in missing


def test_render_response_without_time():
    response = StateResponse(time=None, states=[make_state()])

    lines = render_response(response).splitlines()

    assert lines[:2] == ["Got 1 records.", "Time: -"]
