"""Aircraft flight state."""

from enum import Enum


class FlightState(Enum):
    """Whether an aircraft is on the ground or in the air."""

    GROUNDED = "grounded"
    AIRBORNE = "airborne"
