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

import pytest

from drillscope.drill import ProjectConfig, SurveyStore, TrajectoryWalker, segment
from drillscope.drill.store import GeologyInterval


def _downhole_store():
    store = SurveyStore()
    store.load(
        [{"HOLEID": "A", "EAST": 0, "NORTH": 0, "RL": 100, "DEPTH": 100}],
        [
            {"HOLEID": "A", "DEPTH": 0, "AZIMUTH": 45, "DIP": -60},
            {"HOLEID": "A", "DEPTH": 50, "AZIMUTH": 60, "DIP": -70},
        ],
        [
            {"HOLEID": "A", "FROM": 0, "TO": 3, "ABBRV": "OX"},
            {"HOLEID": "A", "FROM": 3, "TO": 100, "ABBRV": "FR"},
            {"HOLEID": "B", "FROM": 0, "TO": 10, "ABBRV": "BR"},
        ],
    )
    return store


def test_sample_depths_mixes_bounds_breakpoints_and_fill():
    interval = GeologyInterval("A", 0.0, 100.0, "FR")
    depths = segment.sample_depths(interval, [0.0, 50.0, 120.0])
    assert depths == [0.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]


def test_sample_depths_skips_fill_near_breakpoint():
    interval = GeologyInterval("A", 0.0, 40.0, "FR")
    depths = segment.sample_depths(interval, [12.0])
    # step is 5, so the fill at 10 sits within half a step of the breakpoint at 12
    assert 10.0 not in depths
    assert depths.count(12.0) == 1
    assert 5.0 in depths and 15.0 in depths


def test_sample_depths_short_interval_keeps_bounds():
    interval = GeologyInterval("A", 0.0, 3.0, "OX")
    assert segment.sample_depths(interval, []) == [0.0, 3.0]


def test_fill_step_minimum():
    assert segment.fill_step(20.0) == 5.0
    assert segment.fill_step(200.0) == 20.0


def test_short_interval_polyline_has_two_points():
    store = _downhole_store()
    points = segment.build_interval_polyline(store, "A", store.intervals("A")[0])
    assert len(points) == 2


def test_polyline_is_depth_ordered_and_spans_interval():
    store = _downhole_store()
    walker = TrajectoryWalker(store)
    interval = store.intervals("A")[1]
    points = segment.build_interval_polyline(store, "A", interval)
    measured = [walker.depth_from_point("A", p) for p in points]
    assert measured == sorted(measured)
    assert points[0] == walker.point_at_depth("A", 3.0)
    assert points[-1] == walker.point_at_depth("A", 100.0)
    assert walker.point_at_depth("A", 50.0) in points


def test_level_hole_polyline_keeps_depth_order():
    store = SurveyStore()
    store.load(
        [{"HOLEID": "A", "EAST": 0, "NORTH": 0, "RL": 0, "DEPTH": 150}],
        [{"HOLEID": "A", "DEPTH": 100, "AZIMUTH": 90, "DIP": 0}],
        [{"HOLEID": "A", "FROM": 0, "TO": 150, "ABBRV": "FR"}],
    )
    points = segment.build_interval_polyline(store, "A", store.intervals("A")[0])
    xs = [p.x for p in points]
    assert xs == sorted(xs)
    assert xs[0] == pytest.approx(0.0)
    assert xs[-1] == pytest.approx(150.0)
    assert 100.0 in xs


def test_polyline_missing_collar_is_empty():
    store = _downhole_store()
    assert segment.build_interval_polyline(store, "B", store.intervals("B")[0]) == []


def test_vertical_exaggeration_scales_y():
    store = _downhole_store()
    interval = store.intervals("A")[0]
    plain = segment.build_interval_polyline(store, "A", interval)
    scaled = segment.build_interval_polyline(store, "A", interval, ProjectConfig(vertical_exaggeration=5))
    for a, b in zip(plain, scaled):
        assert b.x == a.x
        assert b.y == pytest.approx(a.y * 5)


def test_segment_hole_payloads():
    store = _downhole_store()
    payloads = segment.segment_hole(store, "A")
    assert [p["code"] for p in payloads] == ["OX", "FR"]
    assert payloads[1]["from"] == 3.0
    assert len(payloads[1]["points"]) > 2


def test_segment_all_skips_holes_without_collar(sample_paths):
    store = SurveyStore()
    store.load(*sample_paths)
    payloads = segment.segment_all(store)
    assert {p["hole_id"] for p in payloads} == {"DH001", "DH002"}
    assert len(payloads) == 4
