"""Fixture model for YAML test suite cases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# Description used when a fixture directory has no ``===`` file.
EMPTY_DESCRIPTION = "No meta description was provided"


class FixtureKind(Enum):
    """Whether a fixture is meant to parse or meant to fail."""

    SUCCESS = "success"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExpectFailure:
    """A fixture whose input must be rejected by the parser."""

    test_id: str
    input_text: str
    description: str = EMPTY_DESCRIPTION
    logs: tuple[str, ...] = ()

    @property
    def kind(self) -> FixtureKind:
        return FixtureKind.ERROR

    def __str__(self) -> str:
        return f"{self.test_id}: {self.description}"


@dataclass(frozen=True)
class ExpectSuccess:
    """A fixture whose input must parse to the reference output.

    The reference is ``expected_json`` (JSON text) when present, otherwise
    ``expected_fallback`` (YAML text parsed with the parser under test).
    """

    test_id: str
    input_text: str
    description: str = EMPTY_DESCRIPTION
    expected_json: str | None = None
    expected_fallback: str | None = None
    logs: tuple[str, ...] = ()

    @property
    def kind(self) -> FixtureKind:
        return FixtureKind.SUCCESS

    @property
    def has_reference(self) -> bool:
        """Return True if either reference output was found."""
        return self.expected_json is not None or self.expected_fallback is not None

    def __str__(self) -> str:
        return f"{self.test_id}: {self.description}"


Fixture = Union[ExpectSuccess, ExpectFailure]
