import numpy as np
from typing import List, Optional, Tuple


class ReadingHistory:
    """Bounded in-memory window of the most recent readings."""

    def __init__(self, max_points: int = 300):
        if max_points < 1:
            raise ValueError("max_points must be at least 1")
        self.max_points = max_points
        self.data = []

    def add_point(self, value: float):
        self.data.append(value)

        if len(self.data) > self.max_points:
            self.data = self.data[-self.max_points:]

    def get_history(self) -> List[float]:
        return list(self.data)

    def summary(self) -> Optional[Tuple[float, float, float]]:
        """Return (avg, max, min) over the window, or None when it is empty."""
        if not self.data:
            return None
        values = np.asarray(self.data, dtype=float)
        return float(np.mean(values)), float(np.max(values)), float(np.min(values))

    def __len__(self):
        return len(self.data)
