import unittest

from app.clients.weather import WeatherClient, describe_weather_code
from app.errors import NotFoundError, SchemaError, ValidationError
from upstream_stub import StubUpstream

FORECAST_HOST = "api.open-meteo.com"
GEO_HOST = "geocoding-api.open-meteo.com"


def _forecast_payload():
    return {
        "latitude": 40.71,
        "longitude": -74.01,
        "timezone": "America/New_York",
        "current_units": {
            "time": "iso8601",
            "temperature_2m": "°C",
            "relative_humidity_2m": "%",
            "wind_speed_10m": "km/h",
            "weather_code": "wmo code",
        },
        "current": {
            "time": "2024-01-01T12:00",
            "interval": 900,
            "temperature_2m": 3.4,
            "relative_humidity_2m": 71,
            "wind_speed_10m": 14.2,
            "weather_code": 3,
        },
    }


def _geo_payload():
    return {
        "results": [
            {"id": 5128581, "name": "New York", "latitude": 40.71427, "longitude": -74.00597, "country": "United States"}
        ]
    }


class TestWeatherClient(unittest.IsolatedAsyncioTestCase):
    async def test_get_current_weather_shapes_sample(self):
        stub = StubUpstream().add(FORECAST_HOST, "/v1/forecast", _forecast_payload())
        async with stub.http_client() as http:
            sample = await WeatherClient(http).get_current_weather(40.71, -74.01, "Home")

        self.assertEqual(sample.temperature, 3.4)
        self.assertEqual(sample.humidity, 71)
        self.assertEqual(sample.wind_speed, 14.2)
        self.assertEqual(sample.weather_code, 3)
        self.assertEqual(sample.location, "Home")
        self.assertEqual(sample.time, "2024-01-01T12:00")

        params = stub.requests[0].url.params
        self.assertEqual(params["current"], "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code")
        self.assertEqual(params["timezone"], "auto")
        self.assertEqual(params["latitude"], "40.71")

    async def test_search_by_city_chains_geocoding_then_forecast(self):
        stub = (
            StubUpstream()
            .add(GEO_HOST, "/v1/search", _geo_payload())
            .add(FORECAST_HOST, "/v1/forecast", _forecast_payload())
        )
        async with stub.http_client() as http:
            sample = await WeatherClient(http).search_by_city("new york")

        self.assertEqual(sample.location, "New York")
        geo_req, forecast_req = stub.requests
        self.assertEqual(geo_req.url.params["name"], "new york")
        self.assertEqual(geo_req.url.params["count"], "1")
        self.assertEqual(forecast_req.url.params["latitude"], "40.71427")

    async def test_search_by_city_unknown_raises_not_found(self):
        stub = StubUpstream().add(GEO_HOST, "/v1/search", {"generationtime_ms": 0.5})
        async with stub.http_client() as http:
            with self.assertRaises(NotFoundError) as ctx:
                await WeatherClient(http).search_by_city("Nonexistent City XYZ123")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(len(stub.requests_to(FORECAST_HOST)), 0)

    async def test_search_by_city_empty_results_list_raises_not_found(self):
        stub = StubUpstream().add(GEO_HOST, "/v1/search", {"results": []})
        async with stub.http_client() as http:
            with self.assertRaises(NotFoundError):
                await WeatherClient(http).search_by_city("Atlantis")

    async def test_invalid_coordinates_rejected_before_network(self):
        stub = StubUpstream()
        async with stub.http_client() as http:
            client = WeatherClient(http)
            with self.assertRaises(ValidationError):
                await client.get_current_weather(91, 0, "North of north")
            with self.assertRaises(ValidationError):
                await client.get_current_weather(0, float("nan"), "Nowhere")
            with self.assertRaises(ValidationError):
                await client.get_current_weather(0, 0, "  ")
        self.assertEqual(stub.requests, [])

    async def test_malformed_forecast_raises_schema_error(self):
        stub = StubUpstream().add(FORECAST_HOST, "/v1/forecast", {"current": {"time": "2024-01-01T12:00"}})
        async with stub.http_client() as http:
            with self.assertRaises(SchemaError):
                await WeatherClient(http).get_current_weather(1, 2, "Somewhere")


class TestDescribeWeatherCode(unittest.TestCase):
    def test_code_bands(self):
        self.assertEqual(describe_weather_code(0), "Clear sky")
        self.assertEqual(describe_weather_code(2), "Partly cloudy")
        self.assertEqual(describe_weather_code(45), "Foggy")
        self.assertEqual(describe_weather_code(61), "Rainy")
        self.assertEqual(describe_weather_code(75), "Snowy")
        self.assertEqual(describe_weather_code(95), "Stormy")


if __name__ == "__main__":
    unittest.main()
