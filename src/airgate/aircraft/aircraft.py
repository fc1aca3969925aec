"""Aircraft that request landing and takeoff clearance.

An aircraft owns its flight state and changes it only when the airport
controller grants a request.

Typical usage:
    plane = Aircraft(42, FlightState.AIRBORNE)
    if plane.request_landing(controller) is Decision.ACCEPT_LANDING:
        ...
"""

from typing import TYPE_CHECKING

from airgate.aircraft.state import FlightState
from airgate.control.decision import Decision
from airgate.core.logging_system import get_logger

if TYPE_CHECKING:
    from airgate.control.controller import AirportController

logger = get_logger(__name__)


class Aircraft:
    """An aircraft identified by an integer id.

    Ids are only required to be unique within one airport's records; nothing
    checks them globally.

    Examples:
        >>> plane = Aircraft(1, FlightState.GROUNDED)
        >>> plane.request_takeoff(controller)
        <Decision.ALLOW_TAKEOFF: 'allow_takeoff'>
        >>> plane.flight_state
        <FlightState.AIRBORNE: 'airborne'>
    """

    def __init__(self, aircraft_id: int, flight_state: FlightState = FlightState.AIRBORNE) -> None:
        """Initialize aircraft.

        Args:
            aircraft_id: Aircraft identifier.
            flight_state: Initial flight state.
        """
        self._id = aircraft_id
        self._flight_state = flight_state

    @property
    def id(self) -> int:
        return self._id

    @property
    def flight_state(self) -> FlightState:
        return self._flight_state

    def request_takeoff(self, controller: "AirportController") -> Decision:
        """Ask the controller for takeoff; become airborne if allowed.

        Args:
            controller: Controller of the airport the aircraft is at.

        Returns:
            ALLOW_TAKEOFF or REJECT_TAKEOFF.

        Raises:
            OccupancyError: If the controller has no record of this grounded
                aircraft. The flight state is left unchanged.
        """
        decision = controller.evaluate_takeoff(self)
        if decision is Decision.REJECT_TAKEOFF:
            return decision

        self._flight_state = FlightState.AIRBORNE
        logger.debug("Aircraft %d is airborne", self._id)
        return Decision.ALLOW_TAKEOFF

    def request_landing(self, controller: "AirportController") -> Decision:
        """Ask the controller for landing; become grounded if accepted.

        Args:
            controller: Controller of the destination airport.

        Returns:
            ACCEPT_LANDING, REJECT_LANDING or REDIRECT.
        """
        decision = controller.evaluate_landing(self)
        if decision in (Decision.REJECT_LANDING, Decision.REDIRECT):
            return decision

        self._flight_state = FlightState.GROUNDED
        logger.debug("Aircraft %d is on the ground", self._id)
        return Decision.ACCEPT_LANDING

    def __repr__(self) -> str:
        return f"Aircraft(id={self._id}, flight_state={self._flight_state.name})"
