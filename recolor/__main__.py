# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

import sys

from recolor.runtime.cli import main

sys.exit(main())
