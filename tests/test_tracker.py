from datetime import datetime, timezone

import pytest

from skytrack.exceptions import BoundBoxValidationError, OpenSkyFetchError, StateDecodeError
from skytrack.models.air_traffic import BoundBox, StateResponse
from skytrack.services.response_decoder import ResponseDecodeResult
from skytrack.services.tracker import FlightTracker

BOX = BoundBox(min_latitude=45.8, max_latitude=47.8, min_longitude=5.9, max_longitude=10.5)


class FakeOpenSkyIngestor:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.call_count = 0

    async def get_states(self, box):
        self.call_count += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_result(failures=None):
    response = StateResponse(time=datetime(2024, 5, 3, 19, 40, tzinfo=timezone.utc), states=[])
    return ResponseDecodeResult(response=response, failures=failures or [])


def test_tracker_rejects_invalid_box():
    bad_box = BoundBox(min_latitude=0.0, max_latitude=1.0, min_longitude=3.0, max_longitude=2.0)

    with pytest.raises(BoundBoxValidationError):
        FlightTracker(box=bad_box, frequency=5, ingestor=FakeOpenSkyIngestor([]))


@pytest.mark.anyio
async def test_tracker_polls_and_sleeps_between_cycles():
    shown: list[StateResponse] = []
    sleeps: list[float] = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    ingestor = FakeOpenSkyIngestor([make_result(), make_result(), make_result()])
    tracker = FlightTracker(
        box=BOX, frequency=7, ingestor=ingestor, sink=shown.append, sleep=fake_sleep
    )

    await tracker.run(iterations=3)

    assert ingestor.call_count == 3
    assert len(shown) == 3
    assert sleeps == [7, 7]


@pytest.mark.anyio
async def test_tracker_keeps_running_after_fetch_and_decode_errors():
    shown: list[StateResponse] = []

    async def fake_sleep(seconds):
        return None

    ingestor = FakeOpenSkyIngestor(
        [
            OpenSkyFetchError("OpenSky request failed"),
            make_result(failures=[StateDecodeError("invalid response time: None", field="time")]),
            make_result(failures=[StateDecodeError("bad", index=0)]),
        ]
    )
    tracker = FlightTracker(
        box=BOX, frequency=1, ingestor=ingestor, sink=shown.append, sleep=fake_sleep
    )

    await tracker.run(iterations=3)

    assert ingestor.call_count == 3
    assert len(shown) == 2


@pytest.mark.anyio
async def test_poll_once_returns_none_on_fetch_error():
    ingestor = FakeOpenSkyIngestor([OpenSkyFetchError("boom")])
    tracker = FlightTracker(box=BOX, frequency=1, ingestor=ingestor, sink=lambda r: None)

    assert await tracker.poll_once() is None
