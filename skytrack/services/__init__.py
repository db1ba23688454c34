"""Decoding and validation services for skytrack."""

from .bound_box import validate_bound_box
from .presenter import render_response, render_state
from .response_decoder import RawStateResponse, ResponseDecodeResult, decode_response
from .state_decoder import STATE_SLOTS, StateSlot, decode_state

__all__ = [
    "RawStateResponse",
    "ResponseDecodeResult",
    "STATE_SLOTS",
    "StateSlot",
    "decode_response",
    "decode_state",
    "render_response",
    "render_state",
    "validate_bound_box",
]
