# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import data, desurvey, geology, model, segment, store, validate
from .desurvey import Point3, TrajectoryWalker, point_at_depth, project
from .geology import geology_at
from .model import ProjectConfig
from .segment import build_interval_polyline
from .store import Collar, GeologyInterval, SurveyStation, SurveyStore

__all__ = [
	"data",
	"desurvey",
	"geology",
	"model",
	"segment",
	"store",
	"validate",
	"Collar",
	"GeologyInterval",
	"Point3",
	"ProjectConfig",
	"SurveyStation",
	"SurveyStore",
	"TrajectoryWalker",
	"build_interval_polyline",
	"geology_at",
	"point_at_depth",
	"project",
]
