"""Admission decisions returned by the airport controller."""

from enum import Enum


class Decision(Enum):
    """Outcome of a landing or takeoff request.

    REDIRECT means the airport is full and the aircraft should divert;
    REJECT_LANDING means landing here is not possible right now.
    """

    ACCEPT_LANDING = "accept_landing"
    REJECT_LANDING = "reject_landing"
    REDIRECT = "redirect"
    ALLOW_TAKEOFF = "allow_takeoff"
    REJECT_TAKEOFF = "reject_takeoff"
