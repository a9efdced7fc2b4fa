"""Trailing-edge debounce for revalidation triggers."""

import threading


class Debouncer:
    """Runs the most recently submitted call once no new call arrives for `delay` seconds."""

    def __init__(self, delay: float = 0.1):
        self.delay = delay
        self._timer = None
        self._lock = threading.Lock()

    def submit(self, fn, *args, **kwargs) -> None:
        with self._lock:
            self._cancel()
            self._timer = threading.Timer(self.delay, self._fire, args=(fn, args, kwargs))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, fn, args, kwargs) -> None:
        with self._lock:
            # Superseded by a later submit that arrived while this timer was firing.
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        fn(*args, **kwargs)

    def _cancel(self) -> None:
        if self._timer:
            self._timer.cancel()
            self._timer = None

    def cancel(self) -> None:
        with self._lock:
            self._cancel()

    @property
    def pending(self) -> bool:
        return self._timer is not None
