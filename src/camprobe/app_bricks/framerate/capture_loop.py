# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import math
import os
import time
from typing import Callable, Optional

from camprobe.app_peripherals.camera import BaseCamera, CameraReadError
from camprobe.app_peripherals.display import WindowDisplay
from camprobe.app_utils import Logger
from camprobe.app_utils.image import ImageWriter

from .constants import OUTPUT_DIR, WINDOW_NAME
from .errors import ReadError, WriteError
from .options import CaptureOptions
from .reporter import CaptureSummary, Reporter, TimingSample

logger = Logger("CaptureLoop")


def frame_filename(index: int, relative_ms: float, delta_ms: float, fmt: str, directory: str = OUTPUT_DIR) -> str:
    """
    Build the file name for a saved frame.

    The name encodes the frame index and both timings, e.g.
    ``images/00003.00123.00045.jpg``.
    """
    return os.path.join(directory, f"{index:05d}.{relative_ms:05.0f}.{delta_ms:05.0f}.{fmt}")


def run(
    options: CaptureOptions,
    source: BaseCamera,
    sink: Optional[ImageWriter] = None,
    display: Optional[WindowDisplay] = None,
    reporter: Optional[Reporter] = None,
    clock: Callable[[], float] = time.monotonic,
    directory: str = OUTPUT_DIR,
) -> CaptureSummary:
    """
    Capture options.frame_count frames and time them.

    Each frame is read with a blocking call, timed against the loop start and
    the previous frame, reported, then optionally written to disk and shown.

    Args:
        options: Run configuration.
        source: Started camera. Only capture() is used.
        sink: Frame writer, required when options.save is set.
        display: Frame display, required when options.display is set.
        reporter: Receives every TimingSample. Default: Reporter(verbose=options.verbose)
        clock: Time source in seconds. Must be monotonic.
        directory: Directory prefix for saved frames.

    Returns:
        CaptureSummary: Average interval, framerate and frame count.

    Raises:
        ReadError: A frame could not be read. Nothing after it is processed.
        WriteError: A frame could not be written. Nothing after it is processed.
    """
    if options.save and sink is None:
        raise ValueError("options.save is set but no sink was given")
    if options.display and display is None:
        raise ValueError("options.display is set but no display was given")

    reporter = reporter or Reporter(verbose=options.verbose)

    start_ms = clock() * 1000.0
    last_ms = start_ms
    sum_delta_ms = 0.0

    for index in range(options.frame_count):
        try:
            frame = source.capture()
        except CameraReadError as e:
            logger.debug(f"Frame {index}: {e}")
            raise ReadError("device unreadable", index=index, frames_captured=index) from e

        now_ms = clock() * 1000.0
        sample = TimingSample(index=index, relative_ms=now_ms - start_ms, delta_ms=now_ms - last_ms)
        last_ms = now_ms

        reporter.sample(sample)

        label = WINDOW_NAME
        if options.save:
            label = frame_filename(index, sample.relative_ms, sample.delta_ms, options.format, directory)
            if not sink.write(label, frame):
                raise WriteError("image write failed", index=index, frames_captured=index + 1)

        if options.display:
            try:
                display.show(label, frame)
            except Exception as e:
                logger.warning(f"Could not display frame {index}: {e}")

        sum_delta_ms += sample.delta_ms

    average_delta_ms = sum_delta_ms / options.frame_count
    fps = 1000.0 / average_delta_ms if average_delta_ms != 0 else math.inf
    logger.debug(f"Captured {options.frame_count} frames in {last_ms - start_ms:.1f} ms")

    return CaptureSummary(average_delta_ms=average_delta_ms, fps=fps, frames_captured=options.frame_count)
