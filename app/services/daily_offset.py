import random
import threading
from datetime import date, datetime, timezone
from typing import Callable, Optional


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class DailyOffset:
    """
    Cosmetic adjustment for the displayed order count.

    Holds one value drawn uniformly from ``low..high`` per calendar day (UTC).
    The value is a display tweak only and must never be read as a business
    metric. Writes happen under a lock so concurrent requests at midnight
    agree on the new draw.
    """

    def __init__(
        self,
        low: int = 1,
        high: int = 6,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = _utc_today,
    ):
        if low > high:
            raise ValueError("low must not exceed high")
        self.low = low
        self.high = high
        self._rng = rng or random.Random()
        self._today = today
        self._lock = threading.Lock()
        self._day: Optional[date] = None
        self._value: Optional[int] = None

    def value(self, day: Optional[date] = None) -> int:
        day = day or self._today()
        with self._lock:
            if self._day != day:
                self._value = self._rng.randint(self.low, self.high)
                self._day = day
            return self._value
