"""Shared fixtures for fact-check tests."""

import pytest

from factcheck_system.sifters.verification import DrawSource


class StubDraws(DrawSource):
    """Draw source returning fixed values by key family.

    Keys look like ``person:verified:Name``, ``claim:disputed:...``,
    ``source:host`` or ``preview:host``.
    """

    def __init__(self, verified: float = 0.0, disputed: float = 0.0, other: float = 0.0):
        self.verified = verified
        self.disputed = disputed
        self.other = other
        self.keys = []

    def uniform(self, key: str) -> float:
        self.keys.append(key)
        if ":verified:" in key:
            return self.verified
        if ":disputed:" in key:
            return self.disputed
        return self.other


@pytest.fixture
def stub_draws():
    """Factory for StubDraws instances."""
    return StubDraws


@pytest.fixture
def all_verified(stub_draws):
    """Every drawn entity verified, every range at its base."""
    return stub_draws(verified=0.0, disputed=0.0, other=0.0)


@pytest.fixture
def all_disputed(stub_draws):
    """Every drawable entity fails verification and lands on disputed."""
    return stub_draws(verified=0.99, disputed=0.0, other=0.0)
