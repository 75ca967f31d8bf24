# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

__all__ = [
    "CameraError",
    "CameraOpenError",
    "CameraReadError",
    "CameraConfigError",
]


class CameraError(Exception):
    """Base class for camera errors."""


class CameraOpenError(CameraError):
    """Raised when the camera device cannot be opened."""


class CameraReadError(CameraError):
    """Raised when a frame cannot be read from an open camera."""


class CameraConfigError(CameraError):
    """Raised when a camera source or parameter is not supported."""
