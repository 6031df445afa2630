"""Scalar constants shared by the vector helpers."""

from __future__ import annotations

from math import sqrt

SQRT2: float = sqrt(2.0)
SQRT1_2: float = sqrt(0.5)
