# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of drillscope.

# drillscope is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the license, or
# (at your option) any later version.

# drillscope is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with drillscope.  If not, see <https://www.gnu.org/licenses/>.

"""QA/QC helpers for loaded drillhole tables.

Lookups tolerate everything reported here; these checks exist so callers can
flag dirty input instead of silently rendering it.
"""

import math


def _is_nan(value):
    return isinstance(value, float) and math.isnan(value)


def validate_intervals(store, hole_ids=None):
    issues = []
    for hole_id in sorted(hole_ids if hole_ids is not None else store.referenced_hole_ids()):
        intervals = store.intervals(hole_id)
        prev = None
        for interval in intervals:
            if _is_nan(interval.from_depth) or _is_nan(interval.to_depth):
                issues.append({"hole_id": hole_id, "type": "missing_depth", "interval": interval})
                continue
            if interval.to_depth <= interval.from_depth:
                issues.append({"hole_id": hole_id, "type": "non_positive_length", "interval": interval})
            if prev is not None and interval.from_depth < prev.from_depth:
                issues.append({"hole_id": hole_id, "type": "unordered", "interval": interval})
            prev = interval

        # Overlap is checked on sorted bounds; lookup order does not matter here
        valid = [i for i in intervals if not (_is_nan(i.from_depth) or _is_nan(i.to_depth))]
        prev_to = None
        for interval in sorted(valid, key=lambda i: (i.from_depth, i.to_depth)):
            if prev_to is not None and interval.from_depth < prev_to:
                issues.append({"hole_id": hole_id, "type": "overlap", "interval": interval})
            prev_to = interval.to_depth if prev_to is None else max(prev_to, interval.to_depth)
    return issues


def validate_surveys(store, hole_ids=None):
    issues = []
    for hole_id in sorted(hole_ids if hole_ids is not None else store.referenced_hole_ids()):
        collar = store.collar(hole_id)
        prev_depth = None
        for station in store.stations(hole_id):
            if any(_is_nan(v) for v in (station.depth, station.azimuth, station.dip)):
                issues.append({"hole_id": hole_id, "type": "missing_value", "station": station})
                continue
            if prev_depth is not None and station.depth == prev_depth:
                issues.append({"hole_id": hole_id, "type": "duplicate_depth", "station": station})
            prev_depth = station.depth
            if collar is not None and not _is_nan(collar.depth) and station.depth > collar.depth:
                issues.append({"hole_id": hole_id, "type": "beyond_collar_depth", "station": station})
            if station.dip < -90 or station.dip > 90:
                issues.append({"hole_id": hole_id, "type": "dip_out_of_range",
                               "value": station.dip, "station": station})
            if station.azimuth < 0 or station.azimuth > 360:
                issues.append({"hole_id": hole_id, "type": "azimuth_out_of_range",
                               "value": station.azimuth, "station": station})
    return issues


def validate_collars(store, hole_ids=None):
    issues = []
    for hole_id in sorted(hole_ids if hole_ids is not None else store.referenced_hole_ids()):
        collar = store.collar(hole_id)
        if collar is None:
            issues.append({"hole_id": hole_id, "type": "missing_collar"})
            continue
        if any(_is_nan(v) for v in (collar.east, collar.north, collar.rl, collar.depth)):
            issues.append({"hole_id": hole_id, "type": "missing_value", "collar": collar})
        elif collar.depth < 0:
            issues.append({"hole_id": hole_id, "type": "negative_depth", "collar": collar})
    return issues


def validate_store(store, hole_ids=None):
    """Every collar, survey and geology issue for the loaded holes."""
    return (
        validate_collars(store, hole_ids)
        + validate_surveys(store, hole_ids)
        + validate_intervals(store, hole_ids)
    )
