import unittest

import requests

from app.data_sources import CallableWeatherGateway, City, WeatherForecast, WeatherSample
from app.domain import Activity, UpstreamError
from app.forecast_service import get_recommended_activities, get_weather_forecast, search_cities


def _sample(**overrides):
    base = dict(temperature=-5.0, weather_code=71, wind_speed=5.0, precipitation=2.0, time="2025-01-10T09:00")
    base.update(overrides)
    return WeatherSample(**base)


def _forecast(current=None):
    return WeatherForecast(current=current or _sample(), hourly=[_sample()], daily=[_sample()])


def _failing(*_args, **_kwargs):
    raise requests.ConnectionError("connection refused")


class TestForecastService(unittest.TestCase):
    def test_search_cities_passes_query_and_limit(self):
        calls = {}

        def fake_cities(query, limit):
            calls["args"] = (query, limit)
            return [City(id="1", name="London", country="UK", latitude=51.5074, longitude=-0.1278)]

        gateway = CallableWeatherGateway(cities=fake_cities, forecast=_failing)
        cities = search_cities("London", 3, gateway=gateway)

        self.assertEqual(calls["args"], ("London", 3))
        self.assertEqual(cities[0].name, "London")

    def test_search_cities_wraps_upstream_errors(self):
        gateway = CallableWeatherGateway(cities=_failing, forecast=_failing)
        with self.assertRaises(UpstreamError) as ctx:
            search_cities("London", gateway=gateway)
        self.assertEqual(str(ctx.exception), "Failed to search cities: connection refused")
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_get_weather_forecast_returns_gateway_forecast(self):
        expected = _forecast()
        calls = {}

        def fake_forecast(latitude, longitude, days):
            calls["args"] = (latitude, longitude, days)
            return expected

        gateway = CallableWeatherGateway(cities=_failing, forecast=fake_forecast)
        self.assertIs(get_weather_forecast(1.0, 2.0, 5, gateway=gateway), expected)
        self.assertEqual(calls["args"], (1.0, 2.0, 5))

    def test_get_weather_forecast_wraps_upstream_errors(self):
        gateway = CallableWeatherGateway(cities=_failing, forecast=_failing)
        with self.assertRaisesRegex(UpstreamError, r"^Failed to fetch weather forecast: connection refused$"):
            get_weather_forecast(1.0, 2.0, gateway=gateway)

    def test_recommendations_use_one_day_current_sample(self):
        calls = {}

        def fake_forecast(latitude, longitude, days):
            calls["days"] = days
            return _forecast()

        gateway = CallableWeatherGateway(cities=_failing, forecast=fake_forecast)
        scores = get_recommended_activities(46.0, 7.0, gateway=gateway)

        self.assertEqual(calls["days"], 1)
        self.assertEqual(len(scores), 4)
        self.assertEqual(scores[0].activity, Activity.SKIING)
        self.assertEqual([s.score for s in scores], sorted((s.score for s in scores), reverse=True))

    def test_recommendations_wrap_upstream_errors(self):
        gateway = CallableWeatherGateway(cities=_failing, forecast=_failing)
        with self.assertRaises(UpstreamError) as ctx:
            get_recommended_activities(46.0, 7.0, gateway=gateway)
        self.assertTrue(str(ctx.exception).startswith("Failed to generate activity recommendations: "))
        self.assertIn("connection refused", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
