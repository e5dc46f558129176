from typing import Optional

from reading_history import ReadingHistory
from config import config


class StatisticsDisplay:
    """Average, maximum and minimum of the temperatures seen so far.

    Does not inherit from Observer; having an ``update`` method is enough
    for the weather data to accept it.
    """

    def __init__(self, label: str, weather_data, max_points: Optional[int] = None):
        self.label = label
        if max_points is None:
            max_points = config.HISTORY_SIZE
        self.history = ReadingHistory(max_points)
        weather_data.add_observer(self)
        self.history.add_point(weather_data.temperature)
        self.display()

    def update(self, value):
        self.history.add_point(value)
        self.display()

    def render(self) -> str:
        avg, high, low = self.history.summary()
        return f"{self.label} - Avg/Max/Min temperature = {avg:.1f}/{high:.1f}/{low:.1f}"

    def display(self):
        print(self.render())

    def __repr__(self):
        return f"StatisticsDisplay({self.label!r})"
