"""Tests for draw sources.

Tests cover:
- Hash draws are stable per key and salt
- Seeded draws rewind on reset
- bounded() stays inside [base, base + span)
- build_draw_source selection
"""

import pytest

from factcheck_system.sifters.verification import (
    HashDrawSource,
    SeededDrawSource,
    build_draw_source,
)


class TestHashDrawSource:
    """Tests for HashDrawSource."""

    def test_same_key_same_value(self):
        """Same key yields the same draw across instances."""
        assert HashDrawSource().uniform("person:verified:Ada") == HashDrawSource().uniform(
            "person:verified:Ada"
        )

    def test_values_in_unit_interval(self):
        """Draws fall in [0, 1)."""
        draws = HashDrawSource()
        values = [draws.uniform(f"key-{i}") for i in range(500)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_salt_changes_draws(self):
        """Different salts reshuffle draws."""
        keys = [f"key-{i}" for i in range(20)]
        plain = [HashDrawSource().uniform(k) for k in keys]
        salted = [HashDrawSource(salt="other").uniform(k) for k in keys]
        assert plain != salted

    def test_roughly_uniform(self):
        """Mean of many draws is close to 0.5."""
        draws = HashDrawSource()
        values = [draws.uniform(f"key-{i}") for i in range(4000)]
        assert 0.47 < sum(values) / len(values) < 0.53


class TestSeededDrawSource:
    """Tests for SeededDrawSource."""

    def test_reset_rewinds_sequence(self):
        """reset() replays the same sequence."""
        draws = SeededDrawSource(42)
        first = [draws.uniform("k") for _ in range(5)]
        draws.reset()
        second = [draws.uniform("k") for _ in range(5)]
        assert first == second

    def test_same_seed_same_sequence(self):
        """Two sources with one seed agree."""
        a, b = SeededDrawSource(7), SeededDrawSource(7)
        assert [a.uniform("x") for _ in range(3)] == [b.uniform("y") for _ in range(3)]


class TestBounded:
    """Tests for DrawSource.bounded."""

    @pytest.mark.parametrize("base,span", [(85, 15), (60, 20), (30, 20), (40, 20)])
    def test_within_range(self, base, span):
        """bounded() lands in [base, base + span)."""
        draws = HashDrawSource()
        for i in range(200):
            value = draws.bounded(f"source:host{i}.com", base, span)
            assert base <= value < base + span

    def test_extremes(self, stub_draws):
        """Draw 0 gives base; draw just below 1 gives base + span - 1."""
        assert stub_draws(other=0.0).bounded("source:a", 85, 15) == 85
        assert stub_draws(other=0.9999).bounded("source:a", 85, 15) == 99

    def test_zero_span(self):
        """Zero span returns base without drawing."""
        assert HashDrawSource().bounded("k", 50, 0) == 50


class TestBuildDrawSource:
    """Tests for build_draw_source."""

    def test_no_seed_is_hash(self):
        """No seed selects hash draws."""
        draws = build_draw_source(salt="s")
        assert isinstance(draws, HashDrawSource)
        assert draws.salt == "s"

    def test_seed_is_seeded(self):
        """A seed selects seeded draws, including seed 0."""
        draws = build_draw_source(seed=0)
        assert isinstance(draws, SeededDrawSource)
        assert draws.seed == 0
