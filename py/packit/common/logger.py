# Copyright 2026 Flower Labs GmbH. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""packit Logger."""


import logging
import os
from logging import ERROR, WARN, LogRecord
from typing import TYPE_CHECKING, Any, TextIO

from .constant import PACKIT_LOG_LEVEL

# Create logger
LOGGER_NAME = "packit"
PACKIT_LOGGER = logging.getLogger(LOGGER_NAME)
PACKIT_LOGGER.setLevel(logging.DEBUG)
log = PACKIT_LOGGER.log  # pylint: disable=invalid-name

LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[95m",  # Magenta
    "RESET": "\033[0m",  # Reset to default
}

if TYPE_CHECKING:
    StreamHandler = logging.StreamHandler[Any]
else:
    StreamHandler = logging.StreamHandler


class ConsoleHandler(StreamHandler):
    """Console handler that allows configurable formatting."""

    def __init__(
        self,
        timestamps: bool = False,
        colored: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(stream)
        self.timestamps = timestamps
        self.colored = colored

    def format(self, record: LogRecord) -> str:
        """Format the record as ``LEVEL [time]:  message``, aligned on the colon."""
        prefix = f"%(levelname)s {'%(asctime)s' if self.timestamps else ''}"
        if self.colored:
            prefix = f"{LOG_COLORS[record.levelname]}{prefix}{LOG_COLORS['RESET']}"
        padding = " " * (len("CRITICAL") - len(record.levelname))
        return logging.Formatter(f"{prefix}: {padding} %(message)s").format(record)


def update_console_handler(
    level: int | str | None = None,
    timestamps: bool | None = None,
    colored: bool | None = None,
) -> None:
    """Update the logging handler."""
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        if isinstance(handler, ConsoleHandler):
            if level is not None:
                handler.setLevel(level)
            if timestamps is not None:
                handler.timestamps = timestamps
            if colored is not None:
                handler.colored = colored


def apply_log_level_from_env() -> None:
    """Set the console level from `PACKIT_LOG_LEVEL`; `DEBUG` adds timestamps."""
    log_level = os.getenv(PACKIT_LOG_LEVEL)
    if not log_level:
        return

    log_level = log_level.upper()
    try:
        update_console_handler(level=log_level, timestamps=log_level == "DEBUG")
    except ValueError:
        log(
            ERROR,
            "Invalid %s value %s, keeping level %s",
            PACKIT_LOG_LEVEL,
            log_level,
            logging.getLevelName(console_handler.level),
        )
        return

    if log_level == "DEBUG":
        log(
            WARN,
            "DEBUG logs enabled. Archive member names and file system paths "
            "will be printed for every extracted entry.",
        )


# Configure console logger
console_handler = ConsoleHandler(timestamps=False, colored=True)
console_handler.setLevel(logging.INFO)
PACKIT_LOGGER.addHandler(console_handler)
apply_log_level_from_env()
