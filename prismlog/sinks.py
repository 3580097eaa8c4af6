# sinks.py

import os
import sys
from typing import Optional, TextIO

from .colors import strip_styling
from .components import Level
from .diagnostics import DiagnosticLogger

class ConsoleSink:
    """Writes styled lines to the terminal: INFO and ALL to stdout, WARN and ERROR to stderr."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._stdout = stdout
        self._stderr = stderr

    def _stream(self, level: Level) -> TextIO:
        # Resolved per call so redirected sys streams are honoured
        if level in (Level.WARN, Level.ERROR):
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def write(self, level: Level, line: str) -> None:
        stream = self._stream(level)
        stream.write(line + "\n")
        stream.flush()

class FileSink:
    """Appends unstyled lines to a plain-text log file."""

    def __init__(self, logger: DiagnosticLogger):
        self.logger = logger

    def ensure_directory(self, directory: str) -> bool:
        try:
            os.makedirs(directory, exist_ok=True)
            return True
        except OSError as e:
            self.logger.error(f"Could not create log directory {directory}: {e}")
            return False

    def append(self, path: str, line: str) -> bool:
        """Append `line` without styling; returns False if the write failed."""
        if not self.ensure_directory(os.path.dirname(path) or "."):
            return False
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"{strip_styling(line)}\n")
            return True
        except OSError as e:
            self.logger.error(f"Could not append to log file {path}: {e}")
            return False
