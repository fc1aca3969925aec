"""Deterministic weather services.

FixedWeatherService always reports the same conditions; ScriptedWeatherService
plays back a prepared sequence of readings, one per query. Both are suitable
for tests and for running a controller without a live weather feed.
"""

import logging
from collections.abc import Iterable

from airgate.core.config import ConfigError, ConfigLoader
from airgate.weather.service import (
    IWeatherService,
    WeatherCategory,
    WeatherReading,
    WeatherServiceError,
)

logger = logging.getLogger(__name__)


class FixedWeatherService(IWeatherService):
    """Service that returns a constant reading.

    Examples:
        >>> service = FixedWeatherService(WeatherCategory.STORMY, -10)
        >>> service.get_weather().is_stormy
        True
    """

    def __init__(self, category: WeatherCategory = WeatherCategory.CLEAR, magnitude: int = 0) -> None:
        """Initialize fixed weather service.

        Args:
            category: Category reported on every query.
            magnitude: Magnitude reported on every query.
        """
        self.reading = WeatherReading(category, magnitude)
        self.query_count = 0
        logger.info("FixedWeatherService initialized (%s, %d)", category.value, magnitude)

    def get_name(self) -> str:
        return "fixed"

    def get_weather(self) -> WeatherReading:
        self.query_count += 1
        return self.reading


class ScriptedWeatherService(IWeatherService):
    """Service that returns readings from a script, in order.

    Once the script runs out the last reading is repeated, unless
    ``repeat_last`` is False, in which case further queries fail.

    Examples:
        >>> service = ScriptedWeatherService([
        ...     WeatherReading(WeatherCategory.STORMY, -10),
        ...     WeatherReading(WeatherCategory.CLEAR, 12),
        ... ])
        >>> service.get_weather().category
        <WeatherCategory.STORMY: 'stormy'>
        >>> service.get_weather().category
        <WeatherCategory.CLEAR: 'clear'>
        >>> service.get_weather().category
        <WeatherCategory.CLEAR: 'clear'>
    """

    def __init__(self, readings: Iterable[WeatherReading], repeat_last: bool = True) -> None:
        """Initialize scripted weather service.

        Args:
            readings: Readings to return, in order.
            repeat_last: Keep returning the final reading once exhausted.

        Raises:
            ValueError: If the script is empty.
        """
        self.readings = list(readings)
        if not self.readings:
            raise ValueError("Weather script must contain at least one reading")

        self.repeat_last = repeat_last
        self.query_count = 0

    def get_name(self) -> str:
        return "scripted"

    def get_weather(self) -> WeatherReading:
        """Get the next scripted reading.

        Raises:
            WeatherServiceError: If the script is exhausted and repeat_last
                is False.
        """
        index = self.query_count
        if index >= len(self.readings):
            if not self.repeat_last:
                raise WeatherServiceError(
                    f"Weather script exhausted after {len(self.readings)} readings"
                )
            index = len(self.readings) - 1

        self.query_count += 1
        return self.readings[index]

    @property
    def remaining(self) -> int:
        """Number of scripted readings not yet returned."""
        return max(0, len(self.readings) - self.query_count)


def parse_category(name: str) -> WeatherCategory:
    """Parse a category name such as ``"Stormy"`` or ``"clear"``.

    Raises:
        ConfigError: If the name is not a known category.
    """
    try:
        return WeatherCategory(str(name).strip().lower())
    except ValueError as e:
        known = ", ".join(c.value for c in WeatherCategory)
        raise ConfigError(f"Unknown weather category {name!r} (expected one of: {known})") from e


def weather_service_from_config(config: ConfigLoader) -> FixedWeatherService:
    """Build a fixed weather service from the ``weather`` section.

    Missing keys default to clear weather with a magnitude of 0.

    Raises:
        ConfigError: If the category or magnitude is invalid.
    """
    category = parse_category(config.get("weather.category", WeatherCategory.CLEAR.value))
    magnitude = config.get_int("weather.magnitude", 0)
    return FixedWeatherService(category, magnitude)
