import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from functools import partial

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "prismlog"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

class DiagnosticLogger:
    """Internal logger for soft failures and I/O errors, separate from the styled output."""

    def __init__(self, name: str, logging_enabled: bool = False):
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Owned by this instance; only attached inside console()
        self._handler: Optional[RichHandler] = None
        if logging_enabled:
            self._handler = RichHandler(console=Console(stderr=True), show_path=False)
            self._handler.setLevel(logging.WARNING)

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)

    @contextmanager
    def console(self) -> Iterator[None]:
        """Show every prismlog record on the stderr console while the block runs."""
        if self._handler is None:
            yield
            return
        package = logging.getLogger(PACKAGE_LOGGER)
        package.addHandler(self._handler)
        try:
            yield
        finally:
            package.removeHandler(self._handler)
