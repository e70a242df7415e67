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

"""Row-source reading helpers for collar, survey and geology tables.

Row sources arrive as delimited text (paths or buffers), pandas DataFrames,
or plain sequences of mappings. They are normalised to a list of dict
records keyed by the drillscope field names so the store can accept or skip
each record on its own.
"""

import logging
import math
import os
from collections.abc import Mapping

import pandas as pd

from drillscope.errors import LoadError

logger = logging.getLogger(__name__)


def standardize_columns(df, source_column_map=None):
    """Rename source columns onto drillscope field keys.

    Matching against source_column_map ignores case and surrounding
    whitespace; columns with no entry keep their original name.
    """
    if not source_column_map:
        return df
    lookup = {
        str(raw_name).lower().strip(): expected_name
        for raw_name, expected_name in source_column_map.items()
        if raw_name is not None and expected_name is not None
    }
    renamed = {col: lookup.get(str(col).lower().strip(), col) for col in df.columns}
    out = df.rename(columns=renamed)
    if not out.columns.is_unique:
        out = out.T.groupby(level=0, sort=False).first().T
    return out


def _read_frame(source, kind, **kwargs):
    if isinstance(source, pd.DataFrame):
        return source.copy()
    if kind == "csv":
        # Keep every cell as text so blank fields stay blank rather than NaN
        kwargs.setdefault("dtype", str)
        kwargs.setdefault("keep_default_na", False)
        kwargs.setdefault("skip_blank_lines", True)
        return pd.read_csv(source, **kwargs)
    if kind == "parquet":
        return pd.read_parquet(source, **kwargs)
    raise ValueError(f"Unsupported kind: {kind}")


def _is_path_like(source):
    return isinstance(source, (str, bytes, os.PathLike)) or hasattr(source, "read")


def read_rows(source, label="table", kind="csv", source_column_map=None, **kwargs):
    """Return the records of one row source as a list of dicts.

    ``None`` reads as an empty table. Any failure to read or interpret the
    source is raised as LoadError.
    """
    if source is None:
        return []
    try:
        if isinstance(source, pd.DataFrame) or _is_path_like(source):
            df = standardize_columns(_read_frame(source, kind, **kwargs), source_column_map)
            records = df.to_dict("records")
        else:
            records = []
            for record in source:
                if not isinstance(record, Mapping):
                    raise TypeError(f"expected a mapping per row, got {type(record).__name__}")
                records.append(_rename_record(record, source_column_map))
    except Exception as exc:
        raise LoadError(label, exc) from exc
    logger.info("Loaded %d %s records", len(records), label)
    return records


def _rename_record(record, source_column_map):
    if not source_column_map:
        return dict(record)
    lookup = {str(k).lower().strip(): v for k, v in source_column_map.items()}
    out = {}
    for key, value in record.items():
        mapped = lookup.get(str(key).lower().strip(), key)
        # First non-empty value wins when two source columns map to one key
        if mapped in out and is_present(out[mapped]):
            continue
        out[mapped] = value
    return out


def is_present(value):
    """True when a field holds a non-empty value."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def has_fields(record, required):
    return all(is_present(record.get(field)) for field in required)


def parse_float(value):
    """Parse a numeric field, yielding NaN for anything unparsable."""
    try:
        return float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return math.nan
