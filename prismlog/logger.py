# logger.py

from functools import lru_cache
from typing import Any, Optional

from .config import LoggerConfig
from .components import (
    ColorComponent, ColorRegistry, Level, PropRegistry, RuleComponent, RuleRegistry
)
from .diagnostics import DiagnosticLogger
from .engine import LineComposer, RuleEngine
from .errors import LogStorageError
from .sinks import ConsoleSink, FileSink

class Logger:
    """
    Colorized logger owning its colors, rules and header props.

    Each call composes one line: the props active for the call's level,
    then the message with every rule applied. The styled line goes to the
    terminal and, when storing is on, a stripped copy is appended to the
    configured log file.
    """

    def __init__(self, config: Optional[LoggerConfig] = None,
                 console: Optional[ConsoleSink] = None,
                 file_sink: Optional[FileSink] = None):
        self.config = config or LoggerConfig()
        self.diagnostics = DiagnosticLogger(__name__, self.config.diagnostics)
        self.console = console or ConsoleSink()
        self.file_sink = file_sink or FileSink(self.diagnostics)

        self.colors = ColorRegistry()
        self.props = PropRegistry()
        self.rules = RuleRegistry()
        self.enabled = True
        self.store = True

        self._composer = LineComposer(RuleEngine(self.colors))

    def clone(self) -> "Logger":
        """Return an independent logger with copies of every component."""
        logger = Logger(self.config, self.console, self.file_sink)
        logger.enabled = self.enabled
        logger.store = self.store

        for color in self.colors.active:
            logger.colors.create(color.name, color.color)
        for prop in self.props.active:
            logger.props.create(prop.level, prop.content, *map(_copy_rule, prop.rules))
        for rule in self.rules.active:
            logger.rules.create(rule.pattern, _copy_color(rule.color))

        return logger

    def compose(self, level: Level, *data: Any) -> str:
        message = self.config.separator.join(str(d) for d in data)
        return self._composer.compose_line(level, message, self.rules.active, self.props.active)

    def log(self, *data: Any) -> None:
        self._emit(Level.ALL, data)

    def info(self, *data: Any) -> None:
        self._emit(Level.INFO, data)

    def warn(self, *data: Any) -> None:
        self._emit(Level.WARN, data)

    def error(self, *data: Any) -> None:
        self._emit(Level.ERROR, data)

    def _emit(self, level: Level, data: tuple) -> None:
        # Color fallbacks and storage errors raised here reach this logger's error console only
        with self.diagnostics.console():
            self._output(level, self.compose(level, *data))

    def _output(self, level: Level, line: str) -> None:
        if not (self.enabled and self.config.enabled):
            return

        self.console.write(level, line)

        if self.config.store and self.store:
            if not self.file_sink.append(self.config.path, line) and self.config.unsafe:
                raise LogStorageError(f"Error saving log line to {self.config.path}")

def _copy_color(color):
    if isinstance(color, ColorComponent):
        return ColorComponent(color.name, color.color)
    return color

def _copy_rule(rule: RuleComponent) -> RuleComponent:
    return RuleComponent(rule.pattern, _copy_color(rule.color))

@lru_cache(maxsize=None)
def get_default_logger() -> Logger:
    """Return the process-wide default logger, creating it on first use."""
    return Logger()
