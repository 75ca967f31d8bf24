# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

DEFAULT_DEVICE = 0
DEFAULT_FORMAT = "jpg"
OUTPUT_DIR = "images"
WINDOW_NAME = "Image"

# Requested from the device, not guaranteed
CAPTURE_RESOLUTION = (320, 240)
CAPTURE_FPS = 10

EXIT_OK = 0
EXIT_DEVICE = 1
EXIT_WRITE = 2
EXIT_READ = 3
EXIT_USAGE = 255
