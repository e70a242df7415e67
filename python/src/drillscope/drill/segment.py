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

"""Geology interval polylines for tube and line rendering.

Each geology interval is sampled at its bounds, at any survey station (or
end-of-hole) depth inside it, and at an even fill spacing. Survey depths
carry the real changes in hole direction; the fill spacing keeps long
straight intervals from collapsing to two points.
"""

import logging
import math

import numpy as np

from drillscope.errors import MissingCollar

from .desurvey import TrajectoryWalker
from .model import resolve_config

logger = logging.getLogger(__name__)


def survey_depths(store, hole_id):
    """Station depths of a hole plus its end-of-hole depth."""
    depths = [station.depth for station in store.stations(hole_id)]
    collar = store.collar(hole_id)
    if collar is not None:
        depths.append(collar.depth)
    return depths


def fill_step(length, min_step=5.0, divisions=10):
    return max(min_step, length / divisions)


def sample_depths(interval, breakpoints, min_step=5.0, divisions=10):
    """Sorted, de-duplicated candidate depths for one interval.

    Candidates are the interval bounds, breakpoints strictly inside the
    interval, and fill depths at ``fill_step`` spacing that are not within
    half a step of one of those breakpoints.
    """
    start, end = interval.from_depth, interval.to_depth
    inside = [depth for depth in breakpoints if start < depth < end]
    depths = [start] + inside

    length = end - start
    if math.isfinite(length) and length > 0:
        step = fill_step(length, min_step, divisions)
        fills = start + step * np.arange(1, math.ceil(length / step) + 1)
        for depth in fills[fills < end]:
            if any(abs(depth - bp) < step / 2 for bp in inside):
                continue
            depths.append(float(depth))

    depths.append(end)
    return sorted(set(depths))


def _is_finite_point(point):
    return all(math.isfinite(v) for v in point)


def build_interval_polyline(store, hole_id, interval, config=None):
    """Depth-ordered points along one geology interval.

    Returns an empty list when fewer than two depths resolve to a point, for
    example because the hole has no collar.
    """
    config = resolve_config(config)
    walker = TrajectoryWalker(store)
    depths = sample_depths(
        interval,
        survey_depths(store, hole_id),
        min_step=config.min_step,
        divisions=config.step_divisions,
    )

    resolved = []
    try:
        for depth in depths:
            point = walker.point_at_depth(hole_id, depth)
            if not _is_finite_point(point):
                logger.debug("Unresolved depth %sm in hole %s", depth, hole_id)
                continue
            point = point.exaggerate(config.vertical_exaggeration)
            resolved.append((walker.depth_from_point(hole_id, point, config.vertical_exaggeration), depth, point))
        # Vertical proxy first; sample depth breaks ties along level segments
        resolved.sort(key=lambda item: (item[0], item[1]))
        points = [point for _, _, point in resolved]
    except MissingCollar as exc:
        logger.warning("%s", exc)
        points = []

    if len(points) < 2:
        logger.warning(
            "Not enough points to create geology tube for interval %sm to %sm in hole %s",
            interval.from_depth,
            interval.to_depth,
            hole_id,
        )
        return []
    return points


def segment_hole(store, hole_id, config=None):
    """Polyline payloads for every geology interval of a hole that has geometry."""
    payloads = []
    for interval in store.intervals(hole_id):
        points = build_interval_polyline(store, hole_id, interval, config=config)
        if not points:
            continue
        payloads.append({
            "hole_id": hole_id,
            "from": interval.from_depth,
            "to": interval.to_depth,
            "code": interval.code,
            "points": points,
        })
    logger.debug("Hole %s: %d of %d geology intervals segmented", hole_id, len(payloads), len(store.intervals(hole_id)))
    return payloads


def segment_all(store, hole_ids=None, config=None):
    if hole_ids is None:
        hole_ids = sorted(store.all_hole_ids())
    payloads = []
    with_survey = 0
    without_survey = 0
    for hole_id in hole_ids:
        if not store.has_collar(hole_id):
            logger.warning("No collar data for hole %r", hole_id)
            continue
        if store.stations(hole_id):
            with_survey += 1
        else:
            without_survey += 1
        payloads.extend(segment_hole(store, hole_id, config=config))
    logger.info("Holes with survey data: %d, without survey data: %d", with_survey, without_survey)
    return payloads
