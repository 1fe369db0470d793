"""Observer - a weather station pushing measurements to displays."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

STANDARD_PRESSURE_HPA = 1013.25


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Receive a new set of measurements."""


class WeatherData:
    """Subject holding the latest measurements and its registered observers."""

    def __init__(self):
        self._observers: List[Observer] = []
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def register_observer(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> bool:
        if observer not in self._observers:
            return False
        self._observers.remove(observer)
        return True

    def notify_observers(self) -> None:
        logger.debug("Notifying observers", observers=len(self._observers))
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.notify_observers()


class CurrentConditionsDisplay(Observer):
    def __init__(self, narrator: Narrator, weather_data: WeatherData):
        self.narrator = narrator
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None
        weather_data.register_observer(self)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        if self.temperature is None or self.humidity is None:
            self.narrator.say("Current conditions: no measurements yet")
            return
        self.narrator.say(
            f"Current conditions: {self.temperature:.1f}°C and {self.humidity:.1f}% humidity"
        )


class StatisticsDisplay(Observer):
    """Running average, maximum and minimum temperature."""

    def __init__(self, narrator: Narrator, weather_data: WeatherData):
        self.narrator = narrator
        self.readings = 0
        self.temperature_sum = 0.0
        self.max_temperature: Optional[float] = None
        self.min_temperature: Optional[float] = None
        weather_data.register_observer(self)

    @property
    def average(self) -> float:
        return self.temperature_sum / self.readings if self.readings else 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.readings += 1
        self.temperature_sum += temperature
        if self.max_temperature is None or temperature > self.max_temperature:
            self.max_temperature = temperature
        if self.min_temperature is None or temperature < self.min_temperature:
            self.min_temperature = temperature
        self.display()

    def display(self) -> None:
        if self.max_temperature is None or self.min_temperature is None:
            self.narrator.say("Avg/Max/Min temperature: no measurements yet")
            return
        self.narrator.say(
            f"Avg/Max/Min temperature = {self.average:.1f}/"
            f"{self.max_temperature:.1f}/{self.min_temperature:.1f}°C"
        )


class ForecastDisplay(Observer):
    """Forecast from the direction the pressure is moving."""

    def __init__(self, narrator: Narrator, weather_data: WeatherData):
        self.narrator = narrator
        self.current_pressure = STANDARD_PRESSURE_HPA
        self.last_pressure = STANDARD_PRESSURE_HPA
        self.updates = 0
        weather_data.register_observer(self)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure
        self.updates += 1
        self.display()

    def forecast(self) -> str:
        if self.current_pressure > self.last_pressure:
            return "Improving weather on the way!"
        if self.current_pressure == self.last_pressure:
            return "More of the same"
        return "Watch out for cooler, rainy weather"

    def display(self) -> None:
        self.narrator.say(f"Forecast: {self.forecast()}")


def run_demo(context: "DemoContext") -> None:
    """Push four measurement sets; the forecast display leaves before the last."""
    narrator = context.narrator
    narrator.banner("Observer Pattern - Weather Station Demo")

    weather_data = WeatherData()
    CurrentConditionsDisplay(narrator, weather_data)
    StatisticsDisplay(narrator, weather_data)
    forecast = ForecastDisplay(narrator, weather_data)

    narrator.section("Simulating weather changes")
    updates = [
        ("Warm and humid", 26.6, 65.0, 1013.1),
        ("Getting warmer", 28.5, 70.0, 1012.0),
        ("Cooling down", 22.0, 90.0, 1011.5),
    ]
    for number, (label, temperature, humidity, pressure) in enumerate(updates, start=1):
        narrator.say(f">>> Update {number}: {label}")
        with narrator.indented():
            weather_data.set_measurements(temperature, humidity, pressure)

    narrator.blank()
    narrator.section("Removing Forecast Display")
    weather_data.remove_observer(forecast)
    narrator.say(">>> Update 4: After removing forecast display")
    with narrator.indented():
        weather_data.set_measurements(20.5, 85.0, 1010.0)
    narrator.blank()
    narrator.banner("Observer Demo Complete")
