# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import dataclasses

import pytest

from camprobe.app_bricks.framerate.errors import ConfigError
from camprobe.app_bricks.framerate.options import CaptureOptions, parse_options


class TestParseOptions:
    """Test cases for command-line parsing."""

    def test_frame_count_and_verbose(self):
        """Test that -n and -v are parsed and everything else keeps its default."""
        options = parse_options(["-n10", "-v"])

        assert options.frame_count == 10
        assert options.verbose is True
        assert options.save is False
        assert options.display is False
        assert options.format == "jpg"
        assert options.device == 0
        assert options.debug is False

    def test_all_flags(self):
        options = parse_options(["-n3", "-s", "-d", "-fpng", "-v"])

        assert options == CaptureOptions(frame_count=3, format="png", save=True, display=True, verbose=True)

    def test_missing_frame_count(self):
        """Test that omitting -n is rejected."""
        with pytest.raises(ConfigError):
            parse_options(["-s", "-f", "png"])

    def test_zero_frame_count(self):
        with pytest.raises(ConfigError, match="nonzero"):
            parse_options(["-n0"])

    def test_unrecognized_flag(self):
        with pytest.raises(ConfigError):
            parse_options(["-x"])

    def test_positional_argument_rejected(self):
        """Test that tokens without the flag prefix are errors."""
        with pytest.raises(ConfigError):
            parse_options(["-n5", "frames"])

    @pytest.mark.parametrize("token", ["-nabc", "-n-3", "-n1.5", "-n", "-n=5"])
    def test_malformed_frame_count(self, token):
        with pytest.raises(ConfigError):
            parse_options([token])

    @pytest.mark.parametrize("tokens", [
        ["-n", "5"],
        ["-n5", "-f", "png"],
        ["-n5", "-v", "yes"],
        ["-n5", "-"],
    ])
    def test_values_must_share_the_flag_token(self, tokens):
        """Test that a value in its own token is a stray argument, not the flag's value."""
        with pytest.raises(ConfigError):
            parse_options(tokens)

    @pytest.mark.parametrize("token, field", [
        ("-verbose", "verbose"),
        ("-save", "save"),
        ("-display", "display"),
    ])
    def test_flag_selected_by_second_character(self, token, field):
        """Test that characters after a boolean flag's letter are ignored."""
        options = parse_options(["-n5", token])
        assert getattr(options, field) is True

    def test_grouped_letters_are_not_separate_flags(self):
        options = parse_options(["-n5", "-vs"])
        assert options.verbose is True
        assert options.save is False

    def test_later_frame_count_wins(self):
        assert parse_options(["-n5", "-n7"]).frame_count == 7

    def test_error_before_help_is_reported(self):
        """Test that tokens are handled in order, so a bad flag before -h is an error."""
        with pytest.raises(ConfigError):
            parse_options(["-x", "-h"])

    def test_help_before_error_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-h", "-x"])
        assert exc_info.value.code == 0

    def test_help_selected_by_second_character(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("tokens", [["-n1", "--device"], ["-n1", "--device="], ["-n1", "--verbose"]])
    def test_bad_long_options(self, tokens):
        with pytest.raises(ConfigError):
            parse_options(tokens)

    def test_device_inline_value(self):
        assert parse_options(["-n1", "--device=/dev/video3"]).device == "/dev/video3"

    def test_empty_format_is_accepted(self):
        """Test that -f without a value yields an empty format left for the encoder to reject."""
        options = parse_options(["-n5", "-f"])
        assert options.format == ""

    def test_empty_format_followed_by_flag(self):
        options = parse_options(["-f", "-n5"])
        assert options.format == ""
        assert options.frame_count == 5

    def test_format_not_validated(self):
        options = parse_options(["-n1", "-fnot-a-format"])
        assert options.format == "not-a-format"

    def test_help_exits_successfully(self, capsys):
        """Test that -h prints usage and exits with status 0."""
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-h"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "<n_frames>" in out
        assert "Verbose mode" in out

    def test_device_index(self):
        options = parse_options(["-n1", "--device", "2"])
        assert options.device == 2

    def test_device_path(self):
        options = parse_options(["-n1", "--device", "/dev/video4"])
        assert options.device == "/dev/video4"

    def test_debug_flag(self):
        assert parse_options(["-n1", "--debug"]).debug is True

    def test_options_are_immutable(self):
        options = parse_options(["-n1"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.frame_count = 2
