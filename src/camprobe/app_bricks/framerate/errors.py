# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from .constants import EXIT_DEVICE, EXIT_READ, EXIT_USAGE, EXIT_WRITE

__all__ = [
    "FramerateError",
    "ConfigError",
    "DeviceError",
    "CaptureError",
    "ReadError",
    "WriteError",
]


class FramerateError(Exception):
    """Base class for framerate probe errors. Carries the process exit code."""

    exit_code = 1


class ConfigError(FramerateError):
    """Bad or missing command-line input."""

    exit_code = EXIT_USAGE


class DeviceError(FramerateError):
    """The capture device could not be opened."""

    exit_code = EXIT_DEVICE


class CaptureError(FramerateError):
    """A fatal failure inside the capture loop.

    Attributes:
        index: Index of the frame being processed when the loop aborted.
        frames_captured: Frames successfully read from the device before aborting.
    """

    def __init__(self, message: str, index: int, frames_captured: int):
        super().__init__(message)
        self.index = index
        self.frames_captured = frames_captured


class ReadError(CaptureError):
    """A frame could not be read from the device."""

    exit_code = EXIT_READ


class WriteError(CaptureError):
    """A frame could not be written to disk."""

    exit_code = EXIT_WRITE
