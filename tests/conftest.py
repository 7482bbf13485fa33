"""Shared test configuration.

Hypothesis profiles are chosen with the HYPOTHESIS_PROFILE environment
variable; the default profile keeps local runs quick.
"""

import os

from hypothesis import HealthCheck, settings

settings.register_profile("default", max_examples=100)
settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile("dev", max_examples=20)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
