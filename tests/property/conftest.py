"""Hypothesis settings for the property-based mapping tests."""
from __future__ import annotations

import os

from hypothesis import HealthCheck, settings

settings.register_profile(
    "mapping",
    max_examples=200 if os.getenv("CI") else 50,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("mapping")
