import os
import logging
from dataclasses import dataclass, field
from typing import List


def _labels_from_env() -> List[str]:
    raw = os.getenv("WEATHER_DISPLAY_LABELS", "Display1,Display2")
    return [label.strip() for label in raw.split(",") if label.strip()]


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name}={raw!r} is not a valid {cast.__name__}") from None


@dataclass
class WeatherConfig:
    # Weather Station
    INITIAL_TEMPERATURE: float = 13.0
    DISPLAY_LABELS: List[str] = field(default_factory=lambda: ["Display1", "Display2"])

    # Statistics Display
    HISTORY_SIZE: int = 300

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"

    def validate(self):
        if not self.DISPLAY_LABELS:
            raise ValueError("DISPLAY_LABELS must contain at least one label")
        if self.HISTORY_SIZE < 1:
            raise ValueError("HISTORY_SIZE must be at least 1")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL '{self.LOG_LEVEL}' is not a logging level")


def load_config() -> WeatherConfig:
    """Build a config from the WEATHER_* environment variables."""
    return WeatherConfig(
        INITIAL_TEMPERATURE=_env_number("WEATHER_INITIAL_TEMPERATURE", "13", float),
        DISPLAY_LABELS=_labels_from_env(),
        HISTORY_SIZE=_env_number("WEATHER_HISTORY_SIZE", "300", int),
        LOG_LEVEL=os.getenv("WEATHER_LOG_LEVEL", "INFO"),
    )


# built-in defaults; read the environment with load_config()
config = WeatherConfig()
