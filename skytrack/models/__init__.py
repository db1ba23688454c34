"""Pydantic models for skytrack."""

from .air_traffic import BoundBox, State, StateResponse

__all__ = ["BoundBox", "State", "StateResponse"]
