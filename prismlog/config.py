# config.py

import os
from datetime import datetime
from dataclasses import dataclass, field

# Fixed at import so every logger in the process appends to the same file
SESSION_FILE_NAME = datetime.now().strftime("%Y-%m-%d_%H-%M-%S.txt")

@dataclass
class LoggerConfig:
    """
    Switches shared by a logger and its clones.

    Attributes:
        enabled: Master switch for emitting lines at all.
        store: Append plain-text copies of emitted lines to `path`.
        unsafe: Raise LogStorageError when storing a line fails.
        directory: Directory holding the log file, always ending with a separator.
        file_name: Name of the log file inside `directory`.
        separator: Joins the parts passed to a single log call.
        diagnostics: Report internal errors on a stderr console.
    """
    enabled: bool = True
    store: bool = True
    unsafe: bool = False
    directory: str = "logs/"
    file_name: str = field(default=SESSION_FILE_NAME)
    separator: str = ","
    diagnostics: bool = True

    def __setattr__(self, name, value):
        if name == "directory" and not value.endswith(("/", "\\")):
            value += os.sep
        super().__setattr__(name, value)

    @property
    def path(self) -> str:
        return f"{self.directory}{self.file_name}"
