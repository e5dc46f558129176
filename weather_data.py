import logging
from observer import Subject

logger = logging.getLogger(__name__)


class WeatherData(Subject):
    """Holds the current temperature and notifies observers every time it is set."""

    def __init__(self, temperature):
        super().__init__()
        self._temperature = temperature

    @property
    def temperature(self):
        return self._temperature

    @temperature.setter
    def temperature(self, value):
        self.set_temperature(value)

    def set_temperature(self, value):
        # no change detection: the same value is broadcast again
        self._temperature = value
        self.notify(value)

    def notify(self, value=None):
        for observer in self.observers:
            logger.info("Weather data is updated")
            observer.update(value)
