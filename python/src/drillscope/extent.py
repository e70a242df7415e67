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

import math

import shapely.geometry


class Extent():

    def __init__(self, xmin=None, xmax=None, ymin=None, ymax=None, bbox=None, name=None, crs=None):
        """
        Create an extent object, which is an axis-aligned plan-view bounding box
        (easting/northing) with name and coordinate reference system (CRS).

        Pass either:
        @param bbox - the axis aligned bounding box as a shapely.geometry.box object
        OR
        @param xmin, xmax, ymin, ymax - the coordinates of the bounding box edges

        @param name - optional name for the extent
        @param crs - coordinate reference system of the project coordinates, if known
        """
        if bbox is None:
            bbox = shapely.geometry.box(xmin, ymin, xmax, ymax)
        self.bbox = bbox
        self.set_minmax()
        self.name = name
        self.crs = crs

    def set_minmax(self):
        self.xmin, self.ymin, self.xmax, self.ymax = self.bbox.bounds

    @classmethod
    def from_points(cls, points, name=None, crs=None):
        """Extent of engine-space points (x = easting, z = northing).

        Points with non-finite plan coordinates are ignored. Returns None when
        nothing remains.
        """
        plan = [(p[0], p[2]) for p in points if math.isfinite(p[0]) and math.isfinite(p[2])]
        if not plan:
            return None
        xs = [x for x, _ in plan]
        ys = [y for _, y in plan]
        return cls(bbox=shapely.geometry.box(min(xs), min(ys), max(xs), max(ys)), name=name, crs=crs)

    @classmethod
    def from_store(cls, store, name=None, crs=None):
        """Plan extent of every loaded collar."""
        points = []
        for hole_id in store.all_hole_ids():
            collar = store.collar(hole_id)
            if collar is not None:
                points.append((collar.east, -collar.rl, collar.north))
        return cls.from_points(points, name=name, crs=crs)

    def pad(self, margin):
        return Extent(
            xmin=self.xmin - margin,
            xmax=self.xmax + margin,
            ymin=self.ymin - margin,
            ymax=self.ymax + margin,
            name=self.name,
            crs=self.crs,
        )

    def center(self):
        """Return the bbox center as (easting, northing)."""
        return (self.xmin + self.xmax) / 2.0, (self.ymin + self.ymax) / 2.0

    def size(self):
        return self.xmax - self.xmin, self.ymax - self.ymin
