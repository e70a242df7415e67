# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of drillscope.

# drillscope is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# drillscope is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with drillscope.  If not, see <https://www.gnu.org/licenses/>.

"""
Logging setup for drillscope.

All modules log through children of the ``drillscope`` logger. The package
logger defaults to WARNING; call set_debug_mode to see load summaries and
skipped-row detail.
"""

import logging

logger = logging.getLogger("drillscope")
logger.setLevel(logging.WARNING)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setLevel(logging.DEBUG)
    _handler.setFormatter(logging.Formatter("[drillscope] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_handler)

# Avoid duplicate output through the root logger
logger.propagate = False


def set_debug_mode(enabled: bool):
    """Toggle debug logging on/off.

    Args:
        enabled: If True, sets log level to DEBUG. Otherwise, WARNING.
    """
    logger.setLevel(logging.DEBUG if enabled else logging.WARNING)


def set_level(level):
    logger.setLevel(level)
