import logging
import threading
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class LivenessPinger:
    """
    Hits our own /ping route on a fixed interval so free-tier hosts
    don't put the process to sleep.
    """

    def __init__(
        self,
        url: str,
        interval: float = 14 * 60,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.interval = interval
        self.timeout = timeout
        self.session = session or requests.Session()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def ping_once(self) -> bool:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Self-ping to %s failed: %s", self.url, exc)
            return False
        logger.debug("Self-ping to %s ok", self.url)
        return True

    def _run(self):
        while not self._stop.wait(self.interval):
            self.ping_once()

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="liveness-pinger", daemon=True)
        self._thread.start()
        logger.info("Self-ping every %ss -> %s", self.interval, self.url)

    def stop(self, timeout: Optional[float] = 5.0):
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())
