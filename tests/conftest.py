"""Shared pytest fixtures for tagwire tests."""

import pytest

from tagwire.container import Container
from tagwire.fields import InjectionPointsExtractor


@pytest.fixture()
def container() -> Container:
    """Empty container."""
    return Container()


@pytest.fixture()
def injection_points_extractor() -> InjectionPointsExtractor:
    """InjectionPointsExtractor instance."""
    return InjectionPointsExtractor()
