"""Current weather from the Open-Meteo forecast and geocoding APIs."""
from __future__ import annotations

import math

from app.clients.base import DomainClient, require_text
from app.errors import NotFoundError, ValidationError
from app.http_client import UpstreamRequest
from app.models import ForecastPayload, GeocodingPayload, WeatherSample
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="clients/weather")

OPEN_METEO_WEATHER_URL = "https://api.open-meteo.com/v1"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1"

# Default units: °C, %, km/h.
CURRENT_VARS = ["temperature_2m", "relative_humidity_2m", "wind_speed_10m", "weather_code"]


def describe_weather_code(code: int) -> str:
    """Collapse a WMO weather code into a short human label."""
    if code == 0:
        return "Clear sky"
    if code <= 3:
        return "Partly cloudy"
    if code <= 48:
        return "Foggy"
    if code <= 67:
        return "Rainy"
    if code <= 77:
        return "Snowy"
    return "Stormy"


def _check_coordinate(value: float, name: str, bound: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number")
    if not -bound <= value <= bound:
        raise ValidationError(f"{name} must be between -{bound:g} and {bound:g}")
    return float(value)


class WeatherClient(DomainClient):
    base_url = OPEN_METEO_WEATHER_URL

    async def get_current_weather(self, latitude: float, longitude: float, location: str) -> WeatherSample:
        """Fetch current conditions for coordinates; `location` is the display label."""
        lat = _check_coordinate(latitude, "latitude", 90)
        lon = _check_coordinate(longitude, "longitude", 180)
        label = require_text(location, "location")

        request = self._request(
            "/forecast",
            latitude=lat,
            longitude=lon,
            current=",".join(CURRENT_VARS),
            timezone="auto",
        )
        payload = await self._fetch_model(request, ForecastPayload, context="weather.forecast")
        current = payload.current
        return WeatherSample(
            temperature=current.temperature_2m,
            humidity=current.relative_humidity_2m,
            wind_speed=current.wind_speed_10m,
            weather_code=current.weather_code,
            location=label,
            time=current.time,
        )

    async def search_by_city(self, city_name: str) -> WeatherSample:
        """Resolve `city_name` with the geocoder, then fetch its current weather."""
        name = require_text(city_name, "city name")
        geo_request = UpstreamRequest(
            base_url=OPEN_METEO_GEOCODING_URL,
            path="/search",
            params={"name": name, "count": 1},
        )
        geo = await self._fetch_model(geo_request, GeocodingPayload, context="weather.geocoding")
        if not geo.results:
            logger.info(f"Geocoder returned no match for {name!r}")
            raise NotFoundError("City not found")

        match = geo.results[0]
        logger.debug(f"Resolved {name!r} to {match.name} ({match.latitude}, {match.longitude})")
        return await self.get_current_weather(match.latitude, match.longitude, match.name)
