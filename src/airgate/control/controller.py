"""Landing and takeoff admission for a single airport.

The controller tracks which aircraft are on the ground and decides, one
request at a time, whether an aircraft may land or take off. Rules are
applied in a fixed order:

    landing: stormy weather -> already on the ground -> airport full -> accept
    takeoff: stormy weather -> already airborne -> allow

The controller is not thread-safe. Callers sharing one instance across
threads must hold a lock around each evaluate_* call.

Typical usage:
    from airgate.control.controller import AirportController
    from airgate.weather.providers import FixedWeatherService

    controller = AirportController(FixedWeatherService(), initial_aircraft=[7])
    decision = controller.evaluate_landing(aircraft)
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from airgate.aircraft.state import FlightState
from airgate.control.decision import Decision
from airgate.core.config import ConfigError, ConfigLoader
from airgate.core.logging_system import get_logger
from airgate.weather.service import IWeatherService

if TYPE_CHECKING:
    from airgate.aircraft.aircraft import Aircraft

logger = get_logger(__name__)

DEFAULT_MAX_CAPACITY = 100


class OccupancyError(Exception):
    """Raised when a grounded aircraft is missing from the airport's records."""


class AirportController:
    """Admission control and occupancy bookkeeping for one airport.

    Occupancy is the set of aircraft ids on the ground; ``current_count``
    always equals its size. Capacity is checked before a landing is
    accepted, so an accepted landing never pushes the count past
    ``max_capacity``. Lowering the capacity below the current count evicts
    nobody, it only turns further landings into redirects.

    Examples:
        >>> controller = AirportController(FixedWeatherService(WeatherCategory.CLEAR))
        >>> controller.max_capacity
        100
        >>> plane = Aircraft(1, FlightState.AIRBORNE)
        >>> plane.request_landing(controller)
        <Decision.ACCEPT_LANDING: 'accept_landing'>
        >>> controller.has_aircraft(plane)
        True
    """

    def __init__(
        self,
        weather_service: IWeatherService,
        initial_aircraft: Iterable[int] = (),
        max_capacity: int = DEFAULT_MAX_CAPACITY,
    ) -> None:
        """Initialize the controller.

        Args:
            weather_service: Source of weather readings, queried once per decision.
            initial_aircraft: Ids of aircraft already on the ground. Duplicates
                are collapsed. Capacity is not enforced here.
            max_capacity: Maximum number of aircraft on the ground.
        """
        self.weather_service = weather_service
        self._present: set[int] = set(initial_aircraft)
        self._count = len(self._present)
        self._max_capacity = max_capacity

        logger.info(
            "Airport controller ready: %d/%d aircraft on ground, weather from '%s'",
            self._count,
            self._max_capacity,
            weather_service.get_name(),
        )

    @classmethod
    def from_config(cls, config: ConfigLoader, weather_service: IWeatherService) -> "AirportController":
        """Build a controller from the ``airport`` configuration section.

        Args:
            config: Loaded configuration.
            weather_service: Weather source to inject.

        Returns:
            Configured controller.

        Raises:
            ConfigError: If max_capacity or an aircraft id is not an integer.
        """
        max_capacity = config.get_int("airport.max_capacity", DEFAULT_MAX_CAPACITY)
        initial = config.get("airport.initial_aircraft")
        if initial is None:
            initial = []
        elif not isinstance(initial, list):
            initial = [initial]

        for aircraft_id in initial:
            if isinstance(aircraft_id, bool) or not isinstance(aircraft_id, int):
                raise ConfigError(f"Aircraft ids must be integers, got {aircraft_id!r}")

        return cls(weather_service, initial_aircraft=initial, max_capacity=max_capacity)

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def current_count(self) -> int:
        return self._count

    @property
    def present_aircraft(self) -> frozenset[int]:
        """Snapshot of the ids currently on the ground."""
        return frozenset(self._present)

    def set_max_capacity(self, value: int) -> None:
        """Override the capacity. Applies from the next landing evaluation."""
        logger.info("Max capacity changed from %d to %d", self._max_capacity, value)
        self._max_capacity = value

    def has_aircraft(self, aircraft: "Aircraft") -> bool:
        """Check whether the aircraft is on the ground at this airport."""
        return aircraft.id in self._present

    def evaluate_landing(self, aircraft: "Aircraft") -> Decision:
        """Decide a landing request and record the aircraft if accepted.

        Args:
            aircraft: Aircraft asking to land.

        Returns:
            REJECT_LANDING in stormy weather or when the id is already on the
            ground, REDIRECT when the airport is full, ACCEPT_LANDING otherwise.

        Raises:
            WeatherServiceError: If the weather service has no reading.
        """
        reading = self.weather_service.get_weather()

        if reading.is_stormy:
            logger.debug("Landing rejected for aircraft %d: stormy weather", aircraft.id)
            decision = Decision.REJECT_LANDING
        elif aircraft.id in self._present:
            logger.debug("Landing rejected for aircraft %d: already on the ground", aircraft.id)
            decision = Decision.REJECT_LANDING
        elif self._count + 1 > self._max_capacity:
            logger.debug(
                "Aircraft %d redirected: airport full (%d/%d)",
                aircraft.id,
                self._count,
                self._max_capacity,
            )
            decision = Decision.REDIRECT
        else:
            self._add(aircraft.id)
            decision = Decision.ACCEPT_LANDING

        logger.info("Landing request from aircraft %d: %s", aircraft.id, decision.name)
        return decision

    def evaluate_takeoff(self, aircraft: "Aircraft") -> Decision:
        """Decide a takeoff request and release the aircraft if allowed.

        Args:
            aircraft: Aircraft asking to take off.

        Returns:
            REJECT_TAKEOFF in stormy weather or when the aircraft is already
            airborne, ALLOW_TAKEOFF otherwise.

        Raises:
            OccupancyError: If the aircraft is grounded but this airport has
                no record of it. Nothing is modified.
            WeatherServiceError: If the weather service has no reading.
        """
        reading = self.weather_service.get_weather()

        if reading.is_stormy:
            logger.debug("Takeoff rejected for aircraft %d: stormy weather", aircraft.id)
            decision = Decision.REJECT_TAKEOFF
        elif aircraft.flight_state is FlightState.AIRBORNE:
            logger.debug("Takeoff rejected for aircraft %d: already airborne", aircraft.id)
            decision = Decision.REJECT_TAKEOFF
        else:
            self._remove(aircraft.id)
            decision = Decision.ALLOW_TAKEOFF

        logger.info("Takeoff request from aircraft %d: %s", aircraft.id, decision.name)
        return decision

    def _add(self, aircraft_id: int) -> None:
        self._present.add(aircraft_id)
        self._count += 1

    def _remove(self, aircraft_id: int) -> None:
        if aircraft_id not in self._present:
            logger.error(
                "Aircraft %d reports being on the ground but is not at this airport",
                aircraft_id,
            )
            raise OccupancyError(f"Aircraft {aircraft_id} is not on the ground at this airport")

        self._present.remove(aircraft_id)
        self._count -= 1
