"""Poll OpenSky for a monitoring area and hand every snapshot to a sink."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from skytrack.exceptions import OpenSkyFetchError
from skytrack.ingestors.opensky import OpenSkyIngestor
from skytrack.models.air_traffic import BoundBox, StateResponse
from skytrack.services.bound_box import validate_bound_box
from skytrack.services.presenter import render_response

logger = logging.getLogger("skytrack.tracker")


def print_response(response: StateResponse) -> None:
    print(render_response(response))


class FlightTracker:
    """Run fetch, decode and present cycles for a fixed bounding box.

    The box is validated when the tracker is built so an illegal area stops
    the workflow before the first request.
    """

    def __init__(
        self,
        *,
        box: BoundBox,
        frequency: float,
        ingestor: Optional[OpenSkyIngestor] = None,
        sink: Callable[[StateResponse], None] = print_response,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.box = validate_bound_box(box)
        self.frequency = frequency
        self.ingestor = ingestor or OpenSkyIngestor()
        self.sink = sink
        self.sleep = sleep

    async def poll_once(self) -> StateResponse | None:
        """Run a single cycle; returns ``None`` when nothing could be shown."""

        try:
            result = await self.ingestor.get_states(self.box)
        except OpenSkyFetchError as exc:
            logger.warning("Error retrieving flight data: %s", exc)
            return None

        if result.failures:
            logger.info("Response had %s decode failures", len(result.failures))
        self.sink(result.response)
        return result.response

    async def run(self, iterations: int | None = None) -> None:
        """Poll until cancelled, or ``iterations`` cycles when given."""

        logger.info("Monitoring area: %s", self.box)
        completed = 0
        while iterations is None or completed < iterations:
            await self.poll_once()
            completed += 1
            if iterations is not None and completed >= iterations:
                break
            await self.sleep(self.frequency)


__all__ = ["FlightTracker", "print_response"]
