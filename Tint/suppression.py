# Tint/suppression.py
import threading
import time
from typing import Any, Callable, Dict, NamedTuple, Optional


CHANNELS = ("debug", "info", "warn", "error", "print", "custom")


class Repeat(NamedTuple):
    is_repeat: bool = False
    count: int = 0
    flushed: int = 0


def _now_ms() -> float:
    return time.monotonic() * 1000


class SuppressionCache:
    """
    Keyed memory of the last message per channel.

    A message counts as a repeat when it matches the channel's last text
    and arrives less than `timeout` ms after it was first seen.
    """

    def __init__(
        self,
        enabled: bool = False,
        timeout: int = 1000,
        show_counter: bool = True,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.enabled = enabled
        self.timeout = timeout
        self.show_counter = show_counter
        self._clock = clock or _now_ms
        self._lock = threading.Lock()
        self._last: Dict[str, Dict[str, Any]] = {}
        self._counters: Dict[str, int] = {}
        self._clear_history()

    def _clear_history(self):
        self._last = {c: {"text": None, "timestamp": 0} for c in CHANNELS}

    # ====================================================================
    # Configuration
    # ====================================================================
    def configure(
        self,
        enabled: bool = True,
        timeout: int = 1000,
        show_counter: bool = True,
        reset_history: bool = False,
    ):
        with self._lock:
            self.enabled = enabled
            self.timeout = timeout or 1000
            self.show_counter = show_counter
            if reset_history:
                self._clear_history()

    def enable(self):
        self.configure(enabled=True)

    def disable(self):
        self.configure(enabled=False)

    def reset(self):
        """Forget every channel's last message and all counters."""
        with self._lock:
            self._clear_history()
            self._counters.clear()

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "config": {
                    "enabled": self.enabled,
                    "timeout": self.timeout,
                    "show_counter": self.show_counter,
                },
                "counters": [
                    {"key": key, "count": count}
                    for key, count in self._counters.items()
                ],
            }

    # ====================================================================
    # Lookup
    # ====================================================================
    def check(self, channel: str, text: Any) -> Repeat:
        """
        Record `text` on `channel`.

        `flushed` carries the repeat count of a run that just ended so the
        caller can report it.
        """
        if not self.enabled:
            return Repeat()

        key = f"{channel}:{text}"
        now = self._clock()

        with self._lock:
            last = self._last.setdefault(channel, {"text": None, "timestamp": 0})
            if last["text"] == text and now - last["timestamp"] < self.timeout:
                count = self._counters.get(key, 0) + 1
                self._counters[key] = count
                return Repeat(True, count)

            self._last[channel] = {"text": text, "timestamp": now}
            flushed = self._counters.pop(key, 0)

        return Repeat(False, 0, flushed if self.show_counter else 0)
