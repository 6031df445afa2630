"""Default numeric tolerances for vec2kit comparisons."""

from __future__ import annotations

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12
