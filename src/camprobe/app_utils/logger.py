# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Logger:
    """
    Named logger used across camprobe modules.

    Thin wrapper over the standard library logger so every module can declare
    ``logger = Logger("Name")`` at import time and share one configuration.
    """

    def __init__(self, name: str, level: Optional[int] = None):
        self.name = name
        self._logger = logging.getLogger(f"camprobe.{name}")
        if level is not None:
            self._logger.setLevel(level)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root handler for command-line use.

    Does nothing if the root logger already has handlers.

    Args:
        debug (bool): Log at DEBUG level instead of WARNING.
        stream (TextIO, optional): Destination stream. Default: sys.stderr
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=DEFAULT_FORMAT,
        stream=stream or sys.stderr,
    )
