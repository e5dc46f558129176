from observer import Observer


class CurrentConditionsDisplay(Observer):
    """Shows the most recent temperature on the console.

    Registers itself with the given weather data on construction and renders
    the current reading immediately. Removing it from the weather data stops
    further updates but leaves ``last_value`` readable.
    """

    def __init__(self, label: str, weather_data):
        self.label = label
        weather_data.add_observer(self)
        self.last_value = weather_data.temperature
        self.display()

    def update(self, value):
        self.last_value = value
        self.display()

    def render(self) -> str:
        return f"{self.label} - Temperature: {self.last_value}"

    def display(self):
        print(self.render())

    def __repr__(self):
        return f"CurrentConditionsDisplay({self.label!r})"
