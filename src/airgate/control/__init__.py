"""Airport admission control."""

from airgate.control.controller import DEFAULT_MAX_CAPACITY, AirportController, OccupancyError
from airgate.control.decision import Decision

__all__ = [
    "DEFAULT_MAX_CAPACITY",
    "AirportController",
    "Decision",
    "OccupancyError",
]
