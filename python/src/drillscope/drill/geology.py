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

"""Geology code lookup by depth."""

from drillscope.datamodel import UNKNOWN_CODE


def intervals_at(store, hole_id, depth):
    """All intervals of a hole containing ``depth``, in stored order."""
    return [interval for interval in store.intervals(hole_id) if interval.contains(depth)]


def geology_at(store, hole_id, depth, unknown=UNKNOWN_CODE):
    """Geology code at ``depth`` along ``hole_id``.

    Intervals are scanned in the order they were loaded and the first
    interval with from <= depth < to wins, so overlapping intervals resolve
    to whichever came first. Gaps, unknown holes and holes without geology
    return ``unknown``.
    """
    for interval in store.intervals(hole_id):
        if interval.contains(depth):
            return interval.code
    return unknown
