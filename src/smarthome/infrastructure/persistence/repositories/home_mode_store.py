"""In-memory store for the current home mode."""

from threading import Lock

from smarthome.domain.entities.home_mode import HomeMode


class HomeModeStore:
    """Holds the home mode shared by every service."""

    def __init__(self, initial: HomeMode = HomeMode.NORMAL):
        self._lock = Lock()
        self._mode = initial

    def get(self) -> HomeMode:
        with self._lock:
            return self._mode

    def set(self, mode: HomeMode) -> HomeMode:
        """Replace the mode and return the previous one."""
        with self._lock:
            previous, self._mode = self._mode, mode
            return previous
