# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import os
import re
import cv2
import numpy as np

from camprobe.app_utils import Logger

from .base_camera import BaseCamera
from .errors import CameraOpenError, CameraReadError

logger = Logger("V4LCamera")

V4L_BY_ID_DIR = "/dev/v4l/by-id/"


class V4LCamera(BaseCamera):
    """
    V4L (Video4Linux) camera backed by cv2.VideoCapture.

    Accepts a device index, a numeric string or a /dev/videoN path. Resolution
    and framerate are requested on open but only on a best-effort basis: many
    UVC devices ignore the framerate request, and a mismatch is logged rather
    than treated as an error.
    """

    def __init__(
        self,
        device: str | int = 0,
        resolution: tuple[int, int] | None = (320, 240),
        fps: int = 10,
    ):
        """
        Initialize V4L camera.

        Args:
            device: Camera identifier - can be:
                   - int: Camera index (e.g., 0, 1)
                   - str: Camera index as string or device path (e.g., "/dev/video0")
            resolution (tuple, optional): Requested resolution as (width, height). None keeps the device default.
            fps (int, optional): Requested frames per second. 0 keeps the device default. Default: 10.
        """
        super().__init__(resolution, fps)
        self.device_index = self._resolve_camera_id(device)

        self._cap = None

    def _resolve_camera_id(self, device: str | int) -> int:
        """
        Resolve a camera identifier to the numeric id used by OpenCV.

        Raises:
            CameraOpenError: If the identifier is not an index or a /dev/videoN path.
        """
        if isinstance(device, int):
            return device

        if isinstance(device, str):
            if device.isdigit():
                # by-id links are numbered per physical device, which can differ from /dev/videoN
                device_idx = int(device)
                return self._get_video_devices_by_index().get(device_idx, device_idx)

            suffix = device.removeprefix("/dev/video")
            if suffix != device and suffix.isdigit():
                return int(suffix)

        raise CameraOpenError(f"Cannot resolve camera identifier: {device}")

    def _get_video_devices_by_index(self) -> dict[int, int]:
        """
        Map by-id interface indices to /dev/videoN numbers.

        Returns:
            Dict mapping the index suffix of each /dev/v4l/by-id link to its video device number.
        """
        devices_by_index = {}

        if not os.path.isdir(V4L_BY_ID_DIR):
            logger.debug(f"Directory '{V4L_BY_ID_DIR}' not found, using raw device index")
            return devices_by_index

        try:
            entries = os.listdir(V4L_BY_ID_DIR)
        except OSError as e:
            logger.error(f"Error accessing directory '{V4L_BY_ID_DIR}': {e}")
            return devices_by_index

        for entry in entries:
            full_path = os.path.join(V4L_BY_ID_DIR, entry)
            match = re.search(r"index(\d+)$", entry)
            if not match or not os.path.islink(full_path):
                continue

            device_name = os.path.basename(os.path.realpath(full_path))
            number = device_name.removeprefix("video")
            if not number.isdigit():
                logger.warning(f"Could not parse device number from '{entry}' -> '{device_name}'")
                continue
            devices_by_index[int(match.group(1))] = int(number)

        return devices_by_index

    def _open_camera(self) -> None:
        """Open the device and request resolution and framerate."""
        self._cap = cv2.VideoCapture(self.device_index)
        if not self._cap.isOpened():
            self._cap.release()
            self._cap = None
            raise CameraOpenError(f"Failed to open V4L camera {self.device_index}")

        self._configure()
        logger.info(f"Opened V4L camera with index {self.device_index}")

    def _configure(self) -> None:
        """Request capture properties. Nothing here is fatal."""
        if self.resolution and self.resolution[0] and self.resolution[1]:
            self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.resolution[0])
            self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.resolution[1])

            actual_width = int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            actual_height = int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
            if (actual_width, actual_height) != tuple(self.resolution):
                logger.warning(
                    f"Camera {self.device_index} resolution set to {actual_width}x{actual_height} "
                    f"instead of requested {self.resolution[0]}x{self.resolution[1]}"
                )
                self.resolution = (actual_width, actual_height)

        if self.fps:
            self._cap.set(cv2.CAP_PROP_FPS, self.fps)

            actual_fps = int(self._cap.get(cv2.CAP_PROP_FPS))
            if actual_fps != self.fps:
                logger.warning(f"Camera {self.device_index} FPS set to {actual_fps} instead of requested {self.fps}")
                self.fps = actual_fps

    def _close_camera(self) -> None:
        """Release the device."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def _read_frame(self) -> np.ndarray:
        """Read a frame, blocking until the device delivers one."""
        ret, frame = self._cap.read()
        if not ret or frame is None:
            raise CameraReadError(f"Failed to read from V4L camera {self.device_index}")

        return frame
