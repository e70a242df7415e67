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

"""In-memory survey store for collars, survey stations and geology intervals.

The store is filled in one bulk pass from three row sources and is read-only
afterwards. A reload builds a fresh set of tables and swaps them in only if
every source was read, so a failed reload leaves the previous data in place.
"""

import logging
import math
from dataclasses import dataclass, asdict

import geopandas as gpd
import pandas as pd

from drillscope.datamodel import (
    HOLE_ID,
    EAST,
    NORTH,
    RL,
    DEPTH,
    AZIMUTH,
    DIP,
    FROM,
    TO,
    GEOLOGY_CODE,
    COLLAR_FIELDS,
    SURVEY_FIELDS,
    GEOLOGY_FIELDS,
)
from drillscope.errors import LoadError

from . import data
from .model import resolve_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collar:
    hole_id: str
    east: float
    north: float
    rl: float
    depth: float


@dataclass(frozen=True)
class SurveyStation:
    hole_id: str
    depth: float
    azimuth: float
    dip: float

    @property
    def is_setup(self):
        """Depth-zero stations only set the starting orientation."""
        return self.depth == 0


@dataclass(frozen=True)
class GeologyInterval:
    hole_id: str
    from_depth: float
    to_depth: float
    code: str

    @property
    def length(self):
        return self.to_depth - self.from_depth

    def contains(self, depth):
        return self.from_depth <= depth < self.to_depth


def _has_nan(*values):
    return any(math.isnan(v) for v in values)


class _Staging:
    """Tables under construction during a single load."""

    def __init__(self):
        self.collars = {}
        self.surveys = {}
        self.geology = {}


class SurveyStore:
    def __init__(self, config=None):
        self.config = resolve_config(config)
        self._collars = {}
        self._surveys = {}
        self._geology = {}
        self._loaded = False

    @property
    def loaded(self):
        return self._loaded

    def load(self, collar_rows, survey_rows, geology_rows, **kwargs):
        """Bulk-load all three tables, returning True on success.

        On failure the error is logged and the previously loaded tables are
        kept as they were.
        """
        try:
            self.load_or_raise(collar_rows, survey_rows, geology_rows, **kwargs)
        except LoadError:
            logger.exception("Error loading drillhole data")
            return False
        return True

    def load_or_raise(self, collar_rows, survey_rows, geology_rows, **kwargs):
        column_map = self.config.source_column_map
        staging = _Staging()

        records = data.read_rows(collar_rows, label="collar", source_column_map=column_map, **kwargs)
        self._ingest(records, COLLAR_FIELDS, self._collar_from_record, staging, "collar")

        records = data.read_rows(survey_rows, label="survey", source_column_map=column_map, **kwargs)
        self._ingest(records, SURVEY_FIELDS, self._station_from_record, staging, "survey")

        records = data.read_rows(geology_rows, label="geology", source_column_map=column_map, **kwargs)
        self._ingest(records, GEOLOGY_FIELDS, self._interval_from_record, staging, "geology")

        # Python's sort is stable, so duplicate depths keep their input order
        surveys = {
            hole_id: tuple(sorted(stations, key=lambda s: s.depth))
            for hole_id, stations in staging.surveys.items()
        }
        geology = {hole_id: tuple(intervals) for hole_id, intervals in staging.geology.items()}

        self._collars = staging.collars
        self._surveys = surveys
        self._geology = geology
        self._loaded = True
        logger.info(
            "Processed %d collars, %d surveyed holes, %d holes with geology",
            len(self._collars),
            len(self._surveys),
            len(self._geology),
        )

    def _ingest(self, records, required, build, staging, label):
        skipped = 0
        for record in records:
            if not data.has_fields(record, required):
                skipped += 1
                logger.debug("Skipping %s row with missing fields: %s", label, record)
                continue
            entity = build(record)
            if entity is None:
                skipped += 1
                logger.debug("Skipping %s row with unparsable numbers: %s", label, record)
                continue
            if isinstance(entity, Collar):
                staging.collars[entity.hole_id] = entity
            elif isinstance(entity, SurveyStation):
                staging.surveys.setdefault(entity.hole_id, []).append(entity)
            else:
                staging.geology.setdefault(entity.hole_id, []).append(entity)
        if skipped:
            logger.info("Skipped %d of %d %s rows", skipped, len(records), label)

    def _collar_from_record(self, record):
        east, north, rl, depth = (data.parse_float(record[k]) for k in (EAST, NORTH, RL, DEPTH))
        if self.config.strict_numeric and _has_nan(east, north, rl, depth):
            return None
        return Collar(_hole_key(record[HOLE_ID]), east, north, rl, depth)

    def _station_from_record(self, record):
        depth, azimuth, dip = (data.parse_float(record[k]) for k in (DEPTH, AZIMUTH, DIP))
        if self.config.strict_numeric and _has_nan(depth, azimuth, dip):
            return None
        return SurveyStation(_hole_key(record[HOLE_ID]), depth, azimuth, dip)

    def _interval_from_record(self, record):
        from_depth, to_depth = data.parse_float(record[FROM]), data.parse_float(record[TO])
        if self.config.strict_numeric and _has_nan(from_depth, to_depth):
            return None
        code = str(record[GEOLOGY_CODE]).strip().upper()
        return GeologyInterval(_hole_key(record[HOLE_ID]), from_depth, to_depth, code)

    def collar(self, hole_id):
        return self._collars.get(hole_id)

    def has_collar(self, hole_id):
        return hole_id in self._collars

    def stations(self, hole_id):
        return self._surveys.get(hole_id, ())

    def intervals(self, hole_id):
        return self._geology.get(hole_id, ())

    def all_hole_ids(self):
        """Ids of every hole with a collar. Order is not guaranteed."""
        return list(self._collars)

    def referenced_hole_ids(self):
        """Ids seen in any table, including survey or geology rows with no collar."""
        return list(set(self._collars) | set(self._surveys) | set(self._geology))

    def collars_frame(self, crs=None):
        rows = [asdict(c) for c in self._collars.values()]
        df = pd.DataFrame(rows, columns=["hole_id", "east", "north", "rl", "depth"])
        geom = gpd.points_from_xy(df["east"], df["north"])
        return gpd.GeoDataFrame(df, geometry=geom, crs=crs)

    def stations_frame(self):
        rows = [asdict(s) for stations in self._surveys.values() for s in stations]
        return pd.DataFrame(rows, columns=["hole_id", "depth", "azimuth", "dip"])

    def intervals_frame(self):
        rows = [asdict(i) for intervals in self._geology.values() for i in intervals]
        return pd.DataFrame(rows, columns=["hole_id", "from_depth", "to_depth", "code"])


def _hole_key(value):
    return str(value).strip()
