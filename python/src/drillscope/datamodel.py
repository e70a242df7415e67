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
Drillscope data model

Field keys recognised in collar, survey and geology row sources. Keys are
matched case-sensitively; source_column_map can be used to rename other
spellings onto these before rows are accepted.
"""

HOLE_ID = "HOLEID"
EAST = "EAST"
NORTH = "NORTH"
RL = "RL"
DEPTH = "DEPTH"
AZIMUTH = "AZIMUTH"
DIP = "DIP"
FROM = "FROM"
TO = "TO"
GEOLOGY_CODE = "ABBRV"

# Required fields per row kind. A row missing any of these, or holding an
# empty value for one, is skipped.
COLLAR_FIELDS = (HOLE_ID, EAST, NORTH, RL, DEPTH)
SURVEY_FIELDS = (HOLE_ID, DEPTH, AZIMUTH, DIP)
GEOLOGY_FIELDS = (HOLE_ID, FROM, TO, GEOLOGY_CODE)

# Returned by geology lookups for depths outside every interval
UNKNOWN_CODE = "UNK"

# Columns used by the frame exports and trace tables
TRACE_COLUMNS = ["hole_id", "md", "x", "y", "z", "azimuth", "dip"]
