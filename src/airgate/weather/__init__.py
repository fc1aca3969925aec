"""Weather sources for admission decisions."""

from airgate.weather.providers import (
    FixedWeatherService,
    ScriptedWeatherService,
    parse_category,
    weather_service_from_config,
)
from airgate.weather.service import (
    IWeatherService,
    WeatherCategory,
    WeatherReading,
    WeatherServiceError,
)

__all__ = [
    "FixedWeatherService",
    "IWeatherService",
    "ScriptedWeatherService",
    "WeatherCategory",
    "WeatherReading",
    "WeatherServiceError",
    "parse_category",
    "weather_service_from_config",
]
