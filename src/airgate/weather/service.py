"""Weather service interface consulted by the airport controller.

A weather service reports the current condition category at the airport
together with a signed magnitude. Admission policy only looks at the
category; the magnitude travels with every reading but no rule reads it yet.

Typical usage:
    from airgate.weather.providers import FixedWeatherService
    from airgate.weather.service import WeatherCategory

    service = FixedWeatherService(WeatherCategory.CLEAR, 10)
    reading = service.get_weather()
    if reading.is_stormy:
        ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class WeatherServiceError(Exception):
    """Raised when a weather service cannot produce a reading."""


class WeatherCategory(Enum):
    """Weather condition categories."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    SUNNY = "sunny"
    STORMY = "stormy"
    RAINING = "raining"
    SNOWING = "snowing"
    HAILING = "hailing"


@dataclass
class WeatherReading:
    """A single weather observation.

    Attributes:
        category: Condition category.
        magnitude: Signed, temperature-like severity value. Not used by any
            admission rule.
    """

    category: WeatherCategory
    magnitude: int = 0

    @property
    def is_stormy(self) -> bool:
        """True when conditions forbid both landing and takeoff."""
        return self.category is WeatherCategory.STORMY


class IWeatherService(ABC):
    """Abstract interface for weather sources.

    Examples:
        >>> class CalmService(IWeatherService):
        ...     def get_name(self) -> str:
        ...         return "calm"
        ...     def get_weather(self) -> WeatherReading:
        ...         return WeatherReading(WeatherCategory.SUNNY, 25)
    """

    @abstractmethod
    def get_name(self) -> str:
        """Get service name used in log output."""

    @abstractmethod
    def get_weather(self) -> WeatherReading:
        """Get the current weather at the airport.

        Returns:
            The current reading.

        Raises:
            WeatherServiceError: If no reading is available.
        """
