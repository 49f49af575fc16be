"""Pytest configuration and shared fixtures for the htmlmicrodata test suite.

This module provides shared fixtures, test configuration, and the small
domain model used across the suite.
"""

import os
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from htmlmicrodata import MicrodataFormatter, MicrodataOptions, RenderingContext, create_default_registry

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed; property-based tests will fail to import
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full render pipeline tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@dataclass
class Todo:
    name: str
    description: str
    due: datetime


@pytest.fixture
def todo() -> Todo:
    """The canonical three-member object used in end-to-end tests."""
    return Todo(
        name="Finish this app",
        description="It'll take 6 to 8 weeks.",
        due=datetime(2013, 9, 4, 12, 59, 31, tzinfo=timezone.utc),
    )


@pytest.fixture
def options() -> MicrodataOptions:
    return MicrodataOptions()


@pytest.fixture
def registry():
    """A fresh default registry, unfrozen."""
    return create_default_registry()


@pytest.fixture
def context(registry, options) -> RenderingContext:
    """A rendering context over the default registry."""
    return RenderingContext(registry, options)


@pytest.fixture
def formatter(registry, options) -> MicrodataFormatter:
    return MicrodataFormatter(options, registry)
