"""Fixture subpackage (Layer 0 -- zero internal dependencies)."""

from yamlmatrix.fixtures.errors import LoadingError
from yamlmatrix.fixtures.loader import load_fixture, load_fixtures
from yamlmatrix.fixtures.model import (
    EMPTY_DESCRIPTION,
    ExpectFailure,
    ExpectSuccess,
    Fixture,
    FixtureKind,
)

__all__ = [
    "EMPTY_DESCRIPTION",
    "FixtureKind",
    "ExpectFailure",
    "ExpectSuccess",
    "Fixture",
    "LoadingError",
    "load_fixture",
    "load_fixtures",
]
