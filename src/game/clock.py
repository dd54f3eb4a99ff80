"""Background countdown that ticks a session once per interval."""

import logging
import threading
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class SessionClock:
    """
    Calls ``on_tick`` every ``interval`` seconds on a daemon thread.

    The clock knows nothing about game rules: the session decides when
    time is up. ``stop()`` is safe to call more than once.
    """

    def __init__(self, on_tick: Callable[[], None], interval: float = 1.0):
        self.on_tick = on_tick
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start ticking; restarts the countdown thread if already running."""
        self.stop()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="session-clock", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval * 2)
        self._thread = None

    def _run(self) -> None:
        stop = self._stop
        while not stop.wait(self.interval):
            try:
                self.on_tick()
            except Exception:
                logger.exception("Clock tick handler failed; stopping clock")
                return
