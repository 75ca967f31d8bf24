# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from .camera import Camera
from .base_camera import BaseCamera
from .v4l_camera import V4LCamera
from .errors import *

__all__ = [
    "Camera",
    "BaseCamera",
    "V4LCamera",
    "CameraError",
    "CameraReadError",
    "CameraOpenError",
    "CameraConfigError",
]
