"""Pytest configuration for the hypothesis property suite.

Registers a derandomized profile so property runs are reproducible, with
no per-example deadline and the failure blob printed for replay.
"""

from hypothesis import settings

PROPERTY_PROFILE = "formstate_property_ci"

settings.register_profile(
    PROPERTY_PROFILE,
    derandomize=True,
    max_examples=100,
    deadline=None,
    print_blob=True,
)
settings.load_profile(PROPERTY_PROFILE)
