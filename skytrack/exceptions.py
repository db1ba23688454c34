"""Exceptions raised by the skytrack core and its collaborators."""

from __future__ import annotations

from typing import Any


class BoundBoxValidationError(ValueError):
    """Raised when a bounding box breaks one of the geometric rules."""

    def __init__(self, rule: str, message: str, values: dict[str, float]) -> None:
        super().__init__(message)
        self.rule = rule
        self.values = values


class StateDecodeError(ValueError):
    """Raised when a raw state vector (or the response time) cannot be decoded.

    ``index`` is the record position within the batch, ``slot`` the offending
    wire slot. Both are ``None`` when the failure is not tied to one of them.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        slot: int | None = None,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.slot = slot
        self.field = field
        self.value = value


class OpenSkyFetchError(RuntimeError):
    """Raised when the OpenSky API could not be queried."""


__all__ = ["BoundBoxValidationError", "OpenSkyFetchError", "StateDecodeError"]
