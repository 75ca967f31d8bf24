# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from unittest.mock import patch

import cv2
import numpy as np
import pytest

from camprobe.app_peripherals.display import WindowDisplay


@pytest.fixture
def frame():
    return np.zeros((240, 320, 3), dtype=np.uint8)


@patch("cv2.waitKey")
@patch("cv2.setWindowTitle")
@patch("cv2.imshow")
def test_show_paints_frame(mock_imshow, mock_set_title, mock_wait_key, frame):
    """Test that show() draws the frame in its window, titles it, and pumps the GUI event loop."""
    WindowDisplay("Image", wait_ms=5).show("images/00000.00033.00033.jpg", frame)

    mock_imshow.assert_called_once_with("Image", frame)
    mock_set_title.assert_called_once_with("Image", "images/00000.00033.00033.jpg")
    mock_wait_key.assert_called_once_with(5)


@patch("cv2.waitKey")
@patch("cv2.setWindowTitle")
@patch("cv2.imshow")
def test_changing_labels_reuse_one_window(mock_imshow, mock_set_title, mock_wait_key, frame):
    display = WindowDisplay("Image")
    for label in ("images/00000.00033.00033.jpg", "images/00001.00066.00033.jpg"):
        display.show(label, frame)

    assert {c.args[0] for c in mock_imshow.call_args_list} == {"Image"}
    assert [c.args[1] for c in mock_set_title.call_args_list] == [
        "images/00000.00033.00033.jpg",
        "images/00001.00066.00033.jpg",
    ]


@patch("cv2.destroyAllWindows")
@patch("cv2.namedWindow")
def test_context_manager(mock_named_window, mock_destroy):
    with WindowDisplay("Image") as display:
        assert display.is_open()
        mock_named_window.assert_called_once_with("Image")

    mock_destroy.assert_called_once()
    assert not display.is_open()


@patch("cv2.destroyAllWindows")
@patch("cv2.namedWindow")
def test_windows_destroyed_on_error(mock_named_window, mock_destroy):
    with pytest.raises(RuntimeError):
        with WindowDisplay():
            raise RuntimeError("write failed")

    mock_destroy.assert_called_once()


@patch("cv2.destroyAllWindows", side_effect=cv2.error("no GUI backend"))
def test_destroy_errors_are_ignored(mock_destroy):
    display = WindowDisplay()
    display.destroy_all()

    mock_destroy.assert_called_once()
    assert not display.is_open()
