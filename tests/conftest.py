"""Pytest configuration and shared fixtures for the mdvis test suite.

This module provides shared fixtures and test configuration used across the
unit and integration tests.
"""

import os
import textwrap

import pytest
from hypothesis import Phase, Verbosity, settings

from mdvis.transforms.registry import transform_registry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def reset_transform_registry():
    """Restore the global transform registry to its lazily-initialized state after each test."""
    yield
    transform_registry.clear()


@pytest.fixture
def pie_chart_text() -> str:
    """Provide a small pie chart description.

    Returns
    -------
    str
        Chart block body with two points.

    """
    return 'layout: pie\ndata: [{key:"Dog",value:5},{key:"Cat",value:4}]\n'


@pytest.fixture
def sample_markdown() -> str:
    """Provide a Markdown document mixing prose, code and two charts.

    Returns
    -------
    str
        Markdown text.

    """
    return textwrap.dedent(
        """\
        # Weekly Report

        Visitors were **up** this week.

        ```vis
        layout: bar
        label: Visitors
        data: [
          { key: 'Mon', value: 12 },
          { key: 'Tue', value: 18 },
        ]
        ```

        ```python
        print("not a chart")
        ```

        ```vis
        layout: pie
        data: [{key:"Dog",value:5},{key:"Cat",value:4}]
        ```
        """
    )
