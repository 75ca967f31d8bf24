# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import os
import shutil

import cv2
import numpy as np

from camprobe.app_utils import Logger

logger = Logger("ImageWriter")


class ImageWriter:
    """
    Writes camera frames to disk as individual image files.

    The image format is taken from the file extension and handled entirely by
    OpenCV's encoders, so unsupported or empty extensions surface as a failed
    write rather than being validated here.

    Examples:
        writer = ImageWriter()
        writer.prepare_directory("images")
        ok = writer.write("images/00000.00033.00033.jpg", frame)
    """

    def write(self, path: str, frame: np.ndarray) -> bool:
        """
        Encode a frame and write it to disk.

        Args:
            path (str): Destination path. The extension selects the encoder.
            frame (np.ndarray): Frame in BGR format

        Returns:
            bool: True if the file was written, False if encoding or writing failed.
        """
        try:
            written = cv2.imwrite(path, frame)
        except cv2.error as e:
            # raised when no encoder matches the extension
            logger.error(f"Cannot encode {path}: {e}")
            return False

        if not written:
            logger.warning(f"Failed to write image {path}")
        return bool(written)

    @staticmethod
    def prepare_directory(path: str) -> None:
        """
        Create an output directory and remove anything already inside it.

        Args:
            path (str): Directory to create or empty.
        """
        os.makedirs(path, exist_ok=True)

        removed = 0
        for entry in os.listdir(path):
            full_path = os.path.join(path, entry)
            if os.path.isdir(full_path) and not os.path.islink(full_path):
                shutil.rmtree(full_path)
            else:
                os.remove(full_path)
            removed += 1

        logger.debug(f"Prepared output directory '{path}' ({removed} stale entries removed)")
