"""Pytest configuration and fixtures for htmlattrs tests."""

import pytest

from htmlattrs import Environment


@pytest.fixture
def env():
    """Create a basic strict Environment."""
    return Environment()


@pytest.fixture
def env_lenient():
    """Create an Environment where undefined variables resolve to None."""
    return Environment(strict=False)


@pytest.fixture
def render(env):
    """Compile and render a template source with keyword context."""

    def _render(source: str, **context) -> str:
        return env.from_string(source).render(**context)

    return _render
