"""Decode a full ``/states/all`` response, skipping malformed state vectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Any, Mapping

from skytrack.exceptions import StateDecodeError
from skytrack.models.air_traffic import State, StateResponse
from skytrack.services.state_decoder import decode_state, epoch_to_datetime

logger = logging.getLogger("skytrack.decoder")


@dataclass
class RawStateResponse:
    """Undecoded ``/states/all`` payload as delivered by the API."""

    time: Any
    states: list[Any] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RawStateResponse":
        return cls(time=payload.get("time"), states=payload.get("states"))


@dataclass
class ResponseDecodeResult:
    """Decoded response plus the records that had to be dropped."""

    response: StateResponse
    failures: list[StateDecodeError] = field(default_factory=list)


def _decode_time(raw_time: Any) -> datetime:
    if isinstance(raw_time, bool) or not isinstance(raw_time, (int, float)):
        raise StateDecodeError(
            f"invalid response time: {raw_time!r}", field="time", value=raw_time
        )
    try:
        return epoch_to_datetime(raw_time)
    except (OverflowError, OSError, ValueError) as exc:
        raise StateDecodeError(
            f"invalid response time: {raw_time!r}", field="time", value=raw_time
        ) from exc


def decode_response(raw: RawStateResponse) -> ResponseDecodeResult:
    """Decode every state vector of ``raw``.

    Nothing here raises. A malformed response time leaves ``time`` unset, a
    states value that is not an array yields no states, and a record that
    fails to decode is left out of the response; each of these is logged and
    recorded in ``failures``. Decoded records keep their original order.
    """

    failures: list[StateDecodeError] = []

    response_time: datetime | None = None
    try:
        response_time = _decode_time(raw.time)
    except StateDecodeError as exc:
        logger.warning("Response time left unset: %s", exc)
        failures.append(exc)

    raw_states = raw.states
    if raw_states is None:
        raw_states = []
    elif not isinstance(raw_states, (list, tuple)):
        exc = StateDecodeError(
            f"invalid states collection: expected an array, got {type(raw_states).__name__}",
            field="states",
            value=raw_states,
        )
        logger.warning("Skipping states collection: %s", exc)
        failures.append(exc)
        raw_states = []

    states: list[State] = []
    dropped = 0
    for index, raw_state in enumerate(raw_states):
        try:
            states.append(decode_state(raw_state, index))
        except StateDecodeError as exc:
            logger.warning("Skipping state vector: %s", exc)
            failures.append(exc)
            dropped += 1

    if dropped:
        logger.info("Decoded %s of %s state vectors", len(states), len(raw_states))
    else:
        logger.debug("Decoded %s state vectors", len(states))

    return ResponseDecodeResult(
        response=StateResponse(time=response_time, states=tuple(states)),
        failures=failures,
    )


__all__ = ["RawStateResponse", "ResponseDecodeResult", "decode_response"]
