"""Pytest configuration for the ICUMsgParse test suite.

Hypothesis profiles (the one place max_examples is set):
- dev: local runs, 300 examples per property
- ci: 50 derandomized examples, failure blobs printed for reproduction
- verbose: 100 examples with Hypothesis progress output

The profile comes from HYPOTHESIS_PROFILE when it names one of the above,
else "ci" when CI=true, else "dev":

    HYPOTHESIS_PROFILE=verbose pytest tests/test_parser_hypothesis.py

Tests marked @pytest.mark.fuzz feed arbitrary Unicode to the parser for
thousands of examples. They are skipped unless selected with -m fuzz.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

# Nested pattern strategies vary widely in draw time, so no deadlines.
_PROFILES: dict[str, settings] = {
    "dev": settings(max_examples=300, phases=_PHASES, deadline=None),
    "ci": settings(
        max_examples=50,
        phases=_PHASES,
        deadline=None,
        derandomize=True,
        print_blob=True,
        suppress_health_check=[HealthCheck.too_slow],
    ),
    "verbose": settings(
        max_examples=100, phases=_PHASES, deadline=None, verbosity=Verbosity.verbose
    ),
}

for _name, _profile in _PROFILES.items():
    settings.register_profile(_name, _profile)


def _detect_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running arbitrary-input parser properties (run with -m fuzz)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the -m expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip_fuzz)
