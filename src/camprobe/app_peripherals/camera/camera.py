# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from typing import Union

from .base_camera import BaseCamera
from .errors import CameraConfigError


class Camera:
    """
    Camera factory.

    Picks the camera implementation for a source identifier. Only local V4L
    devices are supported.
    """

    def __new__(cls, source: Union[str, int] = 0, **kwargs) -> BaseCamera:
        """Create a camera instance based on the source type.

        Args:
            source (Union[str, int]): Camera source identifier. Supports:
                - int: V4L camera index (e.g., 0, 1)
                - str: Camera index as string (e.g., "0", "1")
                - str: Device path (e.g., "/dev/video0")
            **kwargs: Forwarded to the implementation:
                resolution (tuple, optional): Requested resolution as (width, height).
                fps (int, optional): Requested frames per second.

        Returns:
            BaseCamera: Camera implementation instance

        Raises:
            CameraConfigError: If the source type is not supported

        Examples:
            ```python
            camera = Camera(0, resolution=(320, 240), fps=10)
            camera = Camera("/dev/video1")
            ```
        """
        if isinstance(source, bool):
            raise CameraConfigError(f"Invalid source type: {type(source)}")

        if isinstance(source, int) or (
            isinstance(source, str) and (source.isdigit() or source.startswith("/dev/video"))
        ):
            from .v4l_camera import V4LCamera
            return V4LCamera(source, **kwargs)
        elif isinstance(source, str):
            raise CameraConfigError(f"Unsupported camera source: {source}")
        else:
            raise CameraConfigError(f"Invalid source type: {type(source)}")
