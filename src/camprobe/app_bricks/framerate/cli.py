# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

"""
Webcam framerate probe

Opens a capture device, grabs a fixed number of frames and reports the
average interval between them.

Usage:
    camprobe -n<n_frames> [-v] [-s] [-d] [-f<fmt>] [--device ID] [--debug]
"""

import sys
from contextlib import ExitStack
from typing import Optional, Sequence

from camprobe.app_peripherals.camera import Camera, CameraError
from camprobe.app_peripherals.display import WindowDisplay
from camprobe.app_utils import Logger, configure_logging
from camprobe.app_utils.image import ImageWriter

from .capture_loop import run
from .constants import CAPTURE_FPS, CAPTURE_RESOLUTION, EXIT_OK, OUTPUT_DIR, WINDOW_NAME
from .errors import ConfigError, DeviceError, FramerateError
from .options import CaptureOptions, build_parser, parse_options
from .reporter import Reporter

logger = Logger("FramerateProbe")


def probe(options: CaptureOptions) -> None:
    """
    Run one capture session.

    The camera and the display window are released on every exit path.

    Raises:
        DeviceError: The camera could not be created or opened.
        CaptureError: A frame read or write failed mid-run.
    """
    with ExitStack() as stack:
        try:
            camera = Camera(options.device, resolution=CAPTURE_RESOLUTION, fps=CAPTURE_FPS)
            stack.enter_context(camera)
        except CameraError as e:
            raise DeviceError(str(e)) from e

        sink = None
        if options.save:
            try:
                ImageWriter.prepare_directory(OUTPUT_DIR)
            except OSError as e:
                # every write will fail and abort the run
                logger.warning(f"Could not prepare '{OUTPUT_DIR}': {e}")
            sink = ImageWriter()

        display = None
        if options.display:
            display = stack.enter_context(WindowDisplay(WINDOW_NAME))

        reporter = Reporter(verbose=options.verbose)
        summary = run(options, camera, sink=sink, display=display, reporter=reporter)
        reporter.summary(summary)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = build_parser()
    tokens = sys.argv[1:] if argv is None else argv

    try:
        options = parse_options(tokens, parser)
    except ConfigError as e:
        parser.print_help(sys.stderr)
        print(f"\n{parser.prog}: error: {e}", file=sys.stderr)
        return e.exit_code

    configure_logging(debug=options.debug)
    logger.debug(f"Options: {options}")

    try:
        probe(options)
    except FramerateError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return e.exit_code

    return EXIT_OK
