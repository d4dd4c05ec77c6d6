from __future__ import annotations

from ..domain.errors import InvalidFieldError
from ..schemas.models import CurrentWeather, DailyForecast, WeatherData


_CURRENT = CurrentWeather(temp=28, condition="Partly Cloudy", wind_speed=15, humidity=75)
_FORECAST = (
    DailyForecast(day="Mon", temp_max=30, temp_min=22, condition="Sunny"),
    DailyForecast(day="Tue", temp_max=32, temp_min=23, condition="Partly Cloudy"),
    DailyForecast(day="Wed", temp_max=29, temp_min=21, condition="Light Rain"),
    DailyForecast(day="Thu", temp_max=31, temp_min=22, condition="Sunny"),
    DailyForecast(day="Fri", temp_max=28, temp_min=20, condition="Thunderstorm"),
)


def mock_weather(location: str) -> WeatherData:
    """Return the bundled five-day sample forecast labelled with ``location``."""
    if not location or not location.strip():
        raise InvalidFieldError("Please enter a location.", field="location")
    return WeatherData(
        location=location.strip(),
        current=_CURRENT,
        forecast=list(_FORECAST),
    )
