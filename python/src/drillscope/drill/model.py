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

"""Project-level settings for drillhole geometry.

ProjectConfig keeps the knobs shared by loading, segmenting and trace
building so callers can pass a single object through the pipeline.
"""

from drillscope.datamodel import UNKNOWN_CODE


class ProjectConfig:
    def __init__(
        self,
        project_id=None,
        unknown_code=UNKNOWN_CODE,
        min_step=5.0,
        step_divisions=10,
        vertical_exaggeration=1.0,
        strict_numeric=False,
        source_column_map=None,
        metadata=None,
    ):
        self.project_id = project_id
        # Geology code returned where no interval covers a depth
        self.unknown_code = unknown_code
        # Fill spacing along a geology interval is max(min_step, length / step_divisions)
        self.min_step = float(min_step)
        self.step_divisions = int(step_divisions)
        # Scale applied to the vertical axis of rendered points
        self.vertical_exaggeration = float(vertical_exaggeration)
        # Skip rows with unparsable numbers instead of loading them as NaN
        self.strict_numeric = bool(strict_numeric)
        self.source_column_map = source_column_map or {}
        self.metadata = metadata or {}

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown config option: {key}")
            setattr(self, key, val)
        return self

    def to_dict(self):
        return {
            "project_id": self.project_id,
            "unknown_code": self.unknown_code,
            "min_step": self.min_step,
            "step_divisions": self.step_divisions,
            "vertical_exaggeration": self.vertical_exaggeration,
            "strict_numeric": self.strict_numeric,
            "source_column_map": dict(self.source_column_map),
            "metadata": dict(self.metadata),
        }

    def copy(self):
        return ProjectConfig(**self.to_dict())


def resolve_config(config=None):
    return config if config is not None else ProjectConfig()
