# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import cv2
import numpy as np

from camprobe.app_utils import Logger

logger = Logger("WindowDisplay")


class WindowDisplay:
    """
    Shows frames in OpenCV HighGUI windows.

    Use as a context manager so windows are destroyed on every exit path:

        with WindowDisplay("Image") as display:
            display.show("Image", frame)
    """

    def __init__(self, window_name: str = "Image", wait_ms: int = 1):
        """
        Args:
            window_name (str): Window created on open().
            wait_ms (int): Milliseconds given to the GUI event loop after each frame.
        """
        self.window_name = window_name
        self.wait_ms = wait_ms
        self._is_open = False

    def open(self) -> None:
        cv2.namedWindow(self.window_name)
        self._is_open = True

    def show(self, label: str, frame: np.ndarray) -> None:
        """Draw a frame in the display window and use label as its title."""
        cv2.imshow(self.window_name, frame)
        cv2.setWindowTitle(self.window_name, label)
        # imshow only paints once the event loop runs
        cv2.waitKey(self.wait_ms)

    def destroy_all(self) -> None:
        """Close every window."""
        try:
            cv2.destroyAllWindows()
        except cv2.error as e:
            logger.warning(f"Error destroying windows: {e}")
        finally:
            self._is_open = False

    def is_open(self) -> bool:
        return self._is_open

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy_all()
