# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from .capture_loop import frame_filename, run
from .cli import main, probe
from .errors import *
from .options import CaptureOptions, build_parser, parse_options
from .reporter import CaptureSummary, Reporter, TimingSample, format_sample, format_summary

__all__ = [
    "CaptureOptions",
    "CaptureSummary",
    "Reporter",
    "TimingSample",
    "build_parser",
    "format_sample",
    "format_summary",
    "frame_filename",
    "main",
    "parse_options",
    "probe",
    "run",
    "FramerateError",
    "ConfigError",
    "DeviceError",
    "CaptureError",
    "ReadError",
    "WriteError",
]
