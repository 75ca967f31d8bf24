# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from abc import ABC, abstractmethod
from typing import Optional, Tuple
import numpy as np

from camprobe.app_utils import Logger

from .errors import CameraError, CameraOpenError, CameraReadError

logger = Logger("Camera")


class BaseCamera(ABC):
    """
    Abstract base class for camera implementations.

    Frames are read synchronously: every call to capture() blocks until the
    device delivers a frame, with no throttling, so the caller observes the
    device's own pacing.
    """

    def __init__(self, resolution: Optional[Tuple[int, int]] = (320, 240), fps: int = 10):
        """
        Initialize the camera base.

        Args:
            resolution (tuple, optional): Requested resolution as (width, height). None keeps the device default.
            fps (int): Requested frames per second. 0 keeps the device default.
        """
        self.resolution = resolution
        self.fps = fps
        self._is_started = False

    def start(self) -> None:
        """Open the device. Calling it on a started camera does nothing."""
        if self._is_started:
            return

        try:
            self._open_camera()
        except CameraOpenError:
            raise
        except Exception as e:
            raise CameraOpenError(f"Failed to start camera: {e}") from e

        self._is_started = True
        logger.info(f"Successfully started {self.__class__.__name__}")

    def stop(self) -> None:
        """Release the device. Errors while releasing are logged, not raised."""
        if not self._is_started:
            return

        try:
            self._close_camera()
            logger.info(f"Stopped {self.__class__.__name__}")
        except Exception as e:
            logger.warning(f"Error stopping camera: {e}")
        finally:
            self._is_started = False

    def capture(self) -> np.ndarray:
        """
        Capture one frame, blocking until the device provides it.

        Returns:
            np.ndarray: The captured frame.

        Raises:
            CameraReadError: If the camera is not started or the read fails.
        """
        if not self._is_started:
            raise CameraReadError(f"{self.__class__.__name__} is not started")

        try:
            frame = self._read_frame()
        except CameraError:
            raise
        except Exception as e:
            raise CameraReadError(f"Frame read failed: {e}") from e

        if frame is None:
            raise CameraReadError(f"{self.__class__.__name__} returned no frame")
        return frame

    def is_started(self) -> bool:
        """Check if the camera is started."""
        return self._is_started

    @abstractmethod
    def _open_camera(self) -> None:
        """Open the camera connection. Must be implemented by subclasses."""
        pass

    @abstractmethod
    def _close_camera(self) -> None:
        """Close the camera connection. Must be implemented by subclasses."""
        pass

    @abstractmethod
    def _read_frame(self) -> Optional[np.ndarray]:
        """Read a single frame from the camera. Must be implemented by subclasses."""
        pass

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
