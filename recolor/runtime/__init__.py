# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Host-side runtime for recolor.

Everything a caller needs around the pure conversion core:

1. Settings -- Loading user preferences into ConversionOptions
2. Reports -- Status lines and JSON documents for results
3. CLI -- The ``recolor`` command

The conversion core never depends on this package.
"""

from recolor.runtime.report import (
    MAX_ERRORS_SHOWN,
    ReportFormat,
    summarize_errors,
    to_report,
)
from recolor.runtime.settings import Settings, load_settings, settings_from_mapping

__all__ = [
    "Settings",
    "load_settings",
    "settings_from_mapping",
    "ReportFormat",
    "to_report",
    "summarize_errors",
    "MAX_ERRORS_SHOWN",
]
