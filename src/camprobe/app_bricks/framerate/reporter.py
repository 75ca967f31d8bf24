# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import math
import sys
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(frozen=True)
class TimingSample:
    """Timing of one captured frame, in milliseconds."""

    index: int
    relative_ms: float
    delta_ms: float


@dataclass(frozen=True)
class CaptureSummary:
    """Result of a completed capture run."""

    average_delta_ms: float
    fps: float
    frames_captured: int


def format_sample(sample: TimingSample) -> str:
    return f"[{sample.index:4d}] Relative: {sample.relative_ms:05.0f}\tDiff: {sample.delta_ms:05.0f}"


def format_summary(summary: CaptureSummary) -> str:
    fps = "inf" if math.isinf(summary.fps) else f"{summary.fps:05.0f}"
    return f"Average: {summary.average_delta_ms:05.0f}\t({fps} FPS)"


class Reporter:
    """
    Prints timing results.

    Per-frame lines are printed only in verbose mode. The summary is always
    printed, framed by blank lines.
    """

    def __init__(self, stream: Optional[TextIO] = None, verbose: bool = False):
        self.stream = stream or sys.stdout
        self.verbose = verbose

    def sample(self, sample: TimingSample) -> None:
        if self.verbose:
            print(format_sample(sample), file=self.stream)

    def summary(self, summary: CaptureSummary) -> None:
        print(f"\n{format_summary(summary)}\n", file=self.stream)
