"""Tests for the weather station observers."""
import pytest

from pattern_catalog.behavioral.observer import (
    STANDARD_PRESSURE_HPA,
    CurrentConditionsDisplay,
    ForecastDisplay,
    StatisticsDisplay,
    WeatherData,
    run_demo,
)
from tests.helpers import said


class TestWeatherStation:
    """Test observer registration and notification."""

    def test_displays_register_themselves_once(self, narrator):
        weather = WeatherData()
        display = CurrentConditionsDisplay(narrator, weather)
        weather.register_observer(display)
        assert weather.observer_count == 1

    def test_every_observer_is_notified(self, narrator):
        weather = WeatherData()
        current = CurrentConditionsDisplay(narrator, weather)
        stats = StatisticsDisplay(narrator, weather)

        weather.set_measurements(25.0, 65.0, 1013.0)

        assert current.temperature == 25.0
        assert current.humidity == 65.0
        assert stats.readings == 1
        assert said(narrator, "Current conditions: 25.0°C and 65.0% humidity")

    def test_removed_observer_stops_receiving(self, narrator):
        weather = WeatherData()
        stats = StatisticsDisplay(narrator, weather)
        weather.set_measurements(20.0, 50.0, 1010.0)

        assert weather.remove_observer(stats) is True
        weather.set_measurements(30.0, 50.0, 1010.0)

        assert stats.readings == 1
        assert weather.remove_observer(stats) is False

    def test_statistics(self, narrator):
        weather = WeatherData()
        stats = StatisticsDisplay(narrator, weather)
        for temperature in (25.0, 27.5, 22.0):
            weather.set_measurements(temperature, 60.0, 1012.0)

        assert stats.average == pytest.approx(24.8333, rel=1e-4)
        assert stats.max_temperature == 27.5
        assert stats.min_temperature == 22.0

    def test_statistics_before_any_reading(self, narrator):
        stats = StatisticsDisplay(narrator, WeatherData())
        assert stats.average == 0.0
        assert stats.max_temperature is None

    def test_displays_before_any_reading_narrate_placeholder(self, narrator):
        weather = WeatherData()
        CurrentConditionsDisplay(narrator, weather).display()
        StatisticsDisplay(narrator, weather).display()
        assert said(narrator, "Current conditions: no measurements yet")
        assert said(narrator, "Avg/Max/Min temperature: no measurements yet")

    def test_forecast_follows_pressure_trend(self, narrator):
        weather = WeatherData()
        forecast = ForecastDisplay(narrator, weather)
        assert forecast.current_pressure == STANDARD_PRESSURE_HPA

        weather.set_measurements(20.0, 50.0, 1015.0)
        assert forecast.forecast() == "Improving weather on the way!"
        weather.set_measurements(20.0, 50.0, 1015.0)
        assert forecast.forecast() == "More of the same"
        weather.set_measurements(20.0, 50.0, 1009.0)
        assert forecast.forecast() == "Watch out for cooler, rainy weather"

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        assert said(demo_context.narrator, "After removing forecast display")
