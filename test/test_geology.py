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

from drillscope.datamodel import UNKNOWN_CODE
from drillscope.drill import SurveyStore, geology


def _hole1_store():
    store = SurveyStore()
    store.load(
        [{"HOLEID": "HOLE1", "EAST": "1000", "NORTH": "2000", "RL": "500", "DEPTH": "50"}],
        [{"HOLEID": "HOLE1", "DEPTH": "0", "AZIMUTH": "0", "DIP": "-90"}],
        [{"HOLEID": "HOLE1", "FROM": "0", "TO": "50", "ABBRV": "ox"}],
    )
    return store


def _intervals_store(rows):
    store = SurveyStore()
    store.load([], [], [{"HOLEID": "A", "FROM": f, "TO": t, "ABBRV": code} for f, t, code in rows])
    return store


def test_geology_at_inside_and_outside():
    store = _hole1_store()
    assert geology.geology_at(store, "HOLE1", 25) == "OX"
    assert geology.geology_at(store, "HOLE1", 60) == UNKNOWN_CODE
    assert geology.geology_at(store, "HOLE1", 50) == UNKNOWN_CODE


def test_geology_at_unknown_hole():
    store = _hole1_store()
    assert geology.geology_at(store, "NOPE", 10) == "UNK"
    assert geology.geology_at(store, "NOPE", 10, unknown="") == ""


def test_intervals_are_half_open():
    store = _intervals_store([(0, 30, "OX"), (30, 90, "FR")])
    assert geology.geology_at(store, "A", 0) == "OX"
    assert geology.geology_at(store, "A", 30) == "FR"


def test_gap_returns_unknown():
    store = _intervals_store([(0, 10, "OX"), (20, 30, "FR")])
    assert geology.geology_at(store, "A", 15) == UNKNOWN_CODE


def test_overlap_first_loaded_wins():
    store = _intervals_store([(10, 40, "FR"), (0, 20, "OX")])
    assert geology.geology_at(store, "A", 15) == "FR"
    assert [i.code for i in geology.intervals_at(store, "A", 15)] == ["FR", "OX"]
    # stored order is the load order
    assert [i.code for i in store.intervals("A")] == ["FR", "OX"]
