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

"""Desurveying utilities.

Positions along a hole are found by straight-tangent projection: each survey
station's azimuth/dip is held from that station to the next one (or to the
collar's total depth after the last station). There is no smoothing between
stations.

Engine space is (x, y, z) = (easting, up, northing). The collar sits at
y = -rl and a downward (negative) dip decreases y, so walking down a hole
moves y towards larger negative values relative to the collar.
"""

import logging
import math
from typing import NamedTuple

import pandas as pd

from drillscope.datamodel import TRACE_COLUMNS
from drillscope.errors import MissingCollar

from .model import resolve_config

logger = logging.getLogger(__name__)


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    def translate(self, delta):
        dx, dy, dz = delta
        return Point3(self.x + dx, self.y + dy, self.z + dz)

    def exaggerate(self, factor):
        return Point3(self.x, self.y * factor, self.z)


def _deg_to_rad(angle):
    return math.radians(angle)


def project(depth_delta, azimuth, dip):
    """Displacement (dx, dy, dz) for ``depth_delta`` along a station's orientation.

    dx is the easting component, dy the vertical (negative dip gives a
    negative dy) and dz the northing. NaN inputs propagate to the output.
    """
    az_rad = _deg_to_rad(azimuth)
    dip_rad = _deg_to_rad(dip)
    dx = depth_delta * math.cos(dip_rad) * math.sin(az_rad)
    dy = depth_delta * math.sin(dip_rad)
    dz = depth_delta * math.cos(dip_rad) * math.cos(az_rad)
    return dx, dy, dz


def collar_point(collar):
    return Point3(collar.east, -collar.rl, collar.north)


class TrajectoryWalker:
    """Answers point-at-depth queries for holes held in a SurveyStore."""

    def __init__(self, store):
        self.store = store

    def _collar(self, hole_id):
        collar = self.store.collar(hole_id)
        if collar is None:
            raise MissingCollar(hole_id)
        return collar

    def point_at_depth(self, hole_id, depth):
        collar = self._collar(hole_id)
        stations = self.store.stations(hole_id)
        position = collar_point(collar)

        if not stations:
            return Point3(position.x, position.y + depth, position.z)

        accumulated = 0.0
        last = len(stations) - 1
        for idx, station in enumerate(stations):
            next_depth = stations[idx + 1].depth if idx < last else collar.depth
            # The last segment also takes depths beyond the end of hole
            if depth <= next_depth or idx == last:
                return position.translate(project(depth - accumulated, station.azimuth, station.dip))
            position = position.translate(project(next_depth - station.depth, station.azimuth, station.dip))
            accumulated = next_depth

    def depth_from_point(self, hole_id, point, vertical_exaggeration=1.0):
        """Approximate along-hole depth of a point produced by point_at_depth.

        Only the vertical offset from the collar is used, so horizontal
        deviation is ignored. This is an ordering key for points from the
        same hole, not an inverse of point_at_depth.
        """
        collar = self._collar(hole_id)
        return -collar.rl - point[1] / vertical_exaggeration


def point_at_depth(store, hole_id, depth):
    """3D point at ``depth`` along ``hole_id``, or None when it has no collar."""
    try:
        return TrajectoryWalker(store).point_at_depth(hole_id, depth)
    except MissingCollar as exc:
        logger.warning("%s", exc)
        return None


def depth_from_point(store, hole_id, point, vertical_exaggeration=1.0):
    try:
        return TrajectoryWalker(store).depth_from_point(hole_id, point, vertical_exaggeration)
    except MissingCollar:
        return None


def _trace_depths(store, hole_id):
    collar = store.collar(hole_id)
    stations = store.stations(hole_id)
    if not stations:
        return [(0.0, None, None), (collar.depth, None, None)]
    depths = [(0.0, stations[0].azimuth, stations[0].dip)]
    for station in stations:
        if station.depth > 0:
            depths.append((station.depth, station.azimuth, station.dip))
    if len(depths) == 1:
        # Only a set-up station; run its orientation to the end of hole
        depths.append((collar.depth, stations[-1].azimuth, stations[-1].dip))
    return depths


def hole_trace(store, hole_id, config=None):
    """Collar point followed by the point at every non set-up station depth.

    Holes without survey stations run vertically from the collar to the
    end-of-hole depth, and holes with only a set-up station end at the
    end-of-hole depth along its orientation.
    """
    config = resolve_config(config)
    if not store.has_collar(hole_id):
        logger.warning("No collar data for hole %r", hole_id)
        return []
    walker = TrajectoryWalker(store)
    points = [walker.point_at_depth(hole_id, md) for md, _, _ in _trace_depths(store, hole_id)]
    return [p.exaggerate(config.vertical_exaggeration) for p in points]


def trace_frame(store, hole_ids=None, config=None):
    """Trace table with one row per trace vertex, like build_traces output."""
    config = resolve_config(config)
    walker = TrajectoryWalker(store)
    if hole_ids is None:
        hole_ids = sorted(store.all_hole_ids())
    records = []
    for hole_id in hole_ids:
        if not store.has_collar(hole_id):
            logger.warning("No collar data for hole %r", hole_id)
            continue
        for md, azimuth, dip in _trace_depths(store, hole_id):
            point = walker.point_at_depth(hole_id, md).exaggerate(config.vertical_exaggeration)
            records.append({
                "hole_id": hole_id,
                "md": md,
                "x": point.x,
                "y": point.y,
                "z": point.z,
                "azimuth": azimuth,
                "dip": dip,
            })
    return pd.DataFrame(records, columns=TRACE_COLUMNS)
