# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
