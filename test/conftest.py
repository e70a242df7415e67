# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC_PATH = ROOT / "python" / "src"
DATA_DIR = ROOT / "test" / "data"

if str(PYTHON_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC_PATH))


@pytest.fixture
def sample_paths():
    return (
        DATA_DIR / "CollarTest.csv",
        DATA_DIR / "SurveyTest.csv",
        DATA_DIR / "GeologyTest.csv",
    )
