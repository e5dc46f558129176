import logging

logger = logging.getLogger(__name__)


class Observer:
    """Observer interface."""

    def update(self, value):
        raise NotImplementedError("Observer subclasses must implement 'update' method.")


class Subject:
    """Base class for observable objects."""

    def __init__(self):
        self._observers = []

    @property
    def observers(self):
        return tuple(self._observers)

    def add_observer(self, observer: Observer):
        if observer is None:
            raise ValueError("observer must not be None")
        if not callable(getattr(observer, "update", None)):
            raise TypeError(f"{type(observer).__name__} has no callable 'update' method")
        # duplicates are kept: a twice-registered observer is updated twice
        self._observers.append(observer)
        logger.debug(f"Observer added: {observer!r} ({len(self._observers)} registered)")

    def remove_observer(self, observer: Observer):
        for i, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[i]
                logger.debug(f"Observer removed: {observer!r} ({len(self._observers)} registered)")
                return
        logger.debug(f"Observer not registered, nothing to remove: {observer!r}")

    def notify(self, value=None):
        # iterate a snapshot so observers may (un)register from inside update()
        for observer in tuple(self._observers):
            observer.update(value)
