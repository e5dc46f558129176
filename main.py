import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from config import load_config
from weather_data import WeatherData
from console_observer import CurrentConditionsDisplay
from statistics_observer import StatisticsDisplay

logger = logging.getLogger(__name__)


def _number(text):
    """Parse a reading; integral values stay ints so 13 prints as 13, not 13.0."""
    value = float(text)
    return int(value) if value.is_integer() else value


def run_demo(initial, readings: Sequence, labels: List[str], stats: bool = False,
             history_size: Optional[int] = None) -> WeatherData:
    """Create the displays, push the first reading, drop the last display, push the rest.

    With a single label there is nothing left to show after a removal, so that
    display stays registered.
    """
    data = WeatherData(_number(initial))

    displays = [CurrentConditionsDisplay(label, data) for label in labels]
    if stats:
        StatisticsDisplay("Statistics", data, max_points=history_size)

    readings = [_number(r) for r in readings]
    if not readings:
        return data

    data.temperature = readings[0]

    if len(displays) > 1:
        removed = displays[-1]
        data.remove_observer(removed)
        logger.debug(f"{removed.label} unregistered")

    for reading in readings[1:]:
        data.temperature = reading

    return data


def main(argv=None):
    settings = load_config()

    parser = argparse.ArgumentParser(description='Weather station observer demo')
    parser.add_argument('--initial', type=_number, default=settings.INITIAL_TEMPERATURE,
                        help='Initial temperature')
    parser.add_argument('--readings', type=_number, nargs='*', default=[14, 15],
                        help='Temperatures to set, in order')
    parser.add_argument('--labels', nargs='+', default=settings.DISPLAY_LABELS,
                        help='Labels of the current-conditions displays')
    parser.add_argument('--stats', action='store_true', help='Attach a statistics display')
    parser.add_argument('--log-level', default=settings.LOG_LEVEL, help='Logging level')
    args = parser.parse_args(argv)

    settings = replace(settings, LOG_LEVEL=args.log_level, DISPLAY_LABELS=args.labels)
    settings.validate()

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)

    run_demo(args.initial, args.readings, settings.DISPLAY_LABELS, stats=args.stats,
             history_size=settings.HISTORY_SIZE)


if __name__ == "__main__":
    main()
