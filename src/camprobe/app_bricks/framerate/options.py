# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

"""
Command-line options for the framerate probe.

Tokens are read left to right. A short flag is selected by its second
character alone and takes its value from the rest of the same token
(``-n30``, ``-fpng``), so ``-verbose`` means ``-v`` and ``-vs`` sets only
verbose. Anything that is not a flag is an error. The argparse parser built
here only documents the options for ``-h``.
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .constants import DEFAULT_DEVICE, DEFAULT_FORMAT, OUTPUT_DIR
from .errors import ConfigError

FLAG_PREFIX = "-"


@dataclass(frozen=True)
class CaptureOptions:
    """Validated run configuration."""

    frame_count: int
    format: str = DEFAULT_FORMAT
    save: bool = False
    display: bool = False
    verbose: bool = False
    device: Union[int, str] = DEFAULT_DEVICE
    debug: bool = False


def _frame_count(value: str) -> int:
    if not value.isdigit():
        raise ConfigError(f"frame count must be an unsigned integer, got '{value}'")
    return int(value)


def _device(value: str) -> Union[int, str]:
    if not value:
        raise ConfigError("--device requires a value")
    return int(value) if value.isdigit() else value


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Describe the options for help and usage output."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Capture frames from a webcam and measure the framerate.",
        allow_abbrev=False,
    )
    parser.add_argument("-n", metavar="<n_frames>",
                        help="Number of frames to capture (required, nonzero), e.g. -n30")
    parser.add_argument("-v", action="store_true",
                        help="Verbose mode (default: off)")
    parser.add_argument("-s", action="store_true",
                        help=f"Saves frames under {OUTPUT_DIR}/ directory (default: off)")
    parser.add_argument("-d", action="store_true",
                        help="Displays images on the screen (default: off)")
    parser.add_argument("-f", metavar="<fmt>",
                        help=f"Sets format to the specified value, e.g. -fpng (default: {DEFAULT_FORMAT})")
    parser.add_argument("--device", metavar="ID",
                        help=f"Camera index or /dev/videoN path (default: {DEFAULT_DEVICE})")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging on stderr")
    return parser


def parse_options(tokens: Sequence[str], parser: Optional[argparse.ArgumentParser] = None) -> CaptureOptions:
    """
    Parse command-line tokens into CaptureOptions.

    Args:
        tokens: Arguments without the program name.
        parser: Parser whose help is printed for -h. Default: build_parser()

    Returns:
        CaptureOptions: The validated configuration.

    Raises:
        ConfigError: On the first unknown flag, positional argument or
            malformed frame count, or on a missing or zero frame count.
        SystemExit: With status 0 after printing help for -h.
    """
    values = {"frame_count": 0}
    tokens = list(tokens)
    position = 0

    while position < len(tokens):
        token = tokens[position]
        position += 1

        if not token.startswith(FLAG_PREFIX) or len(token) < 2:
            raise ConfigError(f"unexpected argument '{token}'")

        if token.startswith("--"):
            name, sep, value = token.partition("=")
            if name == "--device":
                if not sep:
                    if position >= len(tokens):
                        raise ConfigError("--device requires a value")
                    value = tokens[position]
                    position += 1
                values["device"] = _device(value)
            elif name == "--debug" and not sep:
                values["debug"] = True
            elif name == "--help" and not sep:
                _print_help(parser)
            else:
                raise ConfigError(f"unrecognized option '{token}'")
            continue

        kind, remainder = token[1], token[2:]
        if kind == "v":
            values["verbose"] = True
        elif kind == "s":
            values["save"] = True
        elif kind == "d":
            values["display"] = True
        elif kind == "f":
            # an empty format is left for the image encoder to reject
            values["format"] = remainder
        elif kind == "n":
            values["frame_count"] = _frame_count(remainder)
        elif kind == "h":
            _print_help(parser)
        else:
            raise ConfigError(f"unrecognized flag '{token}'")

    if values["frame_count"] == 0:
        raise ConfigError("frame count required and must be nonzero")

    return CaptureOptions(**values)


def _print_help(parser: Optional[argparse.ArgumentParser]) -> None:
    parser = parser or build_parser()
    parser.print_help()
    parser.exit(0)
