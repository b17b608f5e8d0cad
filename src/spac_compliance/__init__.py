# Copyright (c)
# SPDX-License-Identifier: MIT
"""SEC filing-deadline engine for SPAC compliance teams."""

__version__ = "0.1.0"
