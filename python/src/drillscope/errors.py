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

"""Exception types raised by the drillhole engine.

Only load failures and missing collars are exceptional. Skipped rows,
unresolved depths and intervals with too few points are reported through
logging and empty results instead.
"""


class DrillscopeError(Exception):
    pass


class LoadError(DrillscopeError):
    """A collar, survey or geology row source could not be read or parsed."""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load {source} rows: {reason}")


class MissingCollar(DrillscopeError, KeyError):
    """Raised when a trajectory query names a hole with no collar record."""

    def __init__(self, hole_id):
        self.hole_id = hole_id
        super().__init__(hole_id)

    def __str__(self):
        return f"No collar data for hole {self.hole_id!r}"
