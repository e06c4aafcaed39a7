# Tint/logging/base_logging.py
import sys
import threading
from enum import Enum
from typing import Any, Optional, TextIO

from Tint.config import Settings
from Tint.formatting import colorize, format_structured
from Tint.suppression import Repeat, SuppressionCache


class LogLevel(Enum):
    """Log level hierarchy."""

    DEBUG = 0
    INFO = 1
    WARN = 3
    ERROR = 4


class Logging:
    """
    Tint Logging: per-level coloured console output.
    Each level picks a default colour and forwards to the formatting engine.
    """

    _lock = threading.Lock()

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_lock: bool = True,
        min_level: Optional[LogLevel] = None,
        settings: Optional[Settings] = None,
        suppression: Optional[SuppressionCache] = None,
    ):
        self.settings = settings or Settings()
        self._stream = stream
        self._use_lock = use_lock
        self._min_level = min_level or LogLevel.__members__.get(
            self.settings.min_level, LogLevel.DEBUG
        )
        self.suppression = suppression or SuppressionCache(**self.settings.suppression)

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "Logging":
        """Build a logger from settings saved with `Settings.save`."""
        return cls(settings=Settings.load(path), **kwargs)

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _write(self, message: str, level: LogLevel = LogLevel.INFO):
        """Write one line with level filtering."""
        if level.value < self._min_level.value:
            return

        if self._use_lock:
            with Logging._lock:
                self.stream.write(message + "\n")
        else:
            self.stream.write(message + "\n")

        self.stream.flush()

    def _counter(self, count: int) -> str:
        return format_structured(f"[×{count + 1}]", {"all": {"style": "dim"}})

    def _check(
        self, channel: str, text: Any, force: bool, level: LogLevel = LogLevel.INFO
    ) -> Optional[Repeat]:
        """Return None when the message must be swallowed."""
        repeat = self.suppression.check(channel, text)
        if repeat.flushed:
            self._write(
                format_structured(f"[Repeated {repeat.flushed} times]", {"all": {"style": "dim"}}),
                level,
            )
        if repeat.is_repeat and not force:
            return None
        return repeat

    def _emit(
        self, channel: str, level: LogLevel, text: Any, rendered: str, force: bool
    ):
        repeat = self._check(channel, text, force, level)
        if repeat is None:
            return
        if repeat.is_repeat and repeat.count > 0 and self.suppression.show_counter:
            rendered = f"{rendered} {self._counter(repeat.count)}"
        self._write(rendered, level)

    def _level_color(self, channel: str, color: Any):
        if color is None:
            return self.settings.colors.get(channel)
        return color

    # ====================================================================
    # LEVELS
    # ====================================================================
    def debug(self, text: Any, color: Any = None, force: bool = False):
        """Debug message, blue by default."""
        if isinstance(color, bool):
            force, color = color, None
        color = self._level_color("debug", color)
        self._emit("debug", LogLevel.DEBUG, text, colorize(str(text), color), force)

    def info(self, text: Any, color: Any = None, force: bool = False):
        """Info message, uncoloured unless a colour is given."""
        if isinstance(color, bool):
            force, color = color, None
        color = self._level_color("info", color)
        self._emit("info", LogLevel.INFO, text, colorize(str(text), color), force)

    def warn(self, text: Any, color: Any = None, force: bool = False):
        """Warning, yellow by default."""
        if isinstance(color, bool):
            force, color = color, None
        color = self._level_color("warn", color)
        self._emit("warn", LogLevel.WARN, text, colorize(str(text), color), force)

    def error(self, text: Any, color: Any = None, force: bool = False):
        """Error, red by default."""
        if isinstance(color, bool):
            force, color = color, None
        color = self._level_color("error", color)
        self._emit("error", LogLevel.ERROR, text, colorize(str(text), color), force)

    def print(self, text: Any, color: Any = None, force: bool = False):
        """Text in an arbitrary colour (name, hex or RGB)."""
        if isinstance(color, bool):
            force, color = color, None
        color = self._level_color("print", color)
        self._emit("print", LogLevel.INFO, text, colorize(str(text), color), force)

    def custom(self, text: Any, options: Any = None, force: bool = False):
        """Structured or DSL formatting, see `format_structured`."""
        if isinstance(options, dict) and "separators" not in options:
            options = {**options, "separators": self.settings.separators}
        elif options is None:
            options = {"separators": self.settings.separators}
        self._emit(
            "custom", LogLevel.INFO, text, format_structured(str(text), options), force
        )

    # ====================================================================
    # SUPPRESSION
    # ====================================================================
    def configure_suppression(self, **config):
        self.suppression.configure(**config)

    def enable_suppression(self):
        self.suppression.enable()

    def disable_suppression(self):
        self.suppression.disable()

    def reset_suppression(self):
        self.suppression.reset()

    def suppression_stats(self):
        return self.suppression.stats()


# global instance
logging_instance = Logging()
LOG = logging_instance
