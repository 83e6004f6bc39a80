"""Tests for shuffle uniformity statistics (simulation/)."""

import matplotlib
import numpy as np
import pytest

from deck import Shuffle
from simulation.runner import run_shuffle_trials
from simulation.statistics import ShuffleStatistics


class TestShuffleStatistics:
    """Test the positional frequency tally."""

    def test_record_identity(self):
        """Identity permutations fill the diagonal."""
        stats = ShuffleStatistics(size=3)
        stats.record([0, 1, 2])
        stats.record([0, 1, 2])

        assert stats.trials == 2
        np.testing.assert_array_equal(stats.counts, 2 * np.eye(3, dtype=np.int64))

    def test_record_permutation(self):
        """Each card is counted at its new position."""
        stats = ShuffleStatistics(size=3)
        stats.record([2, 0, 1])

        assert stats.counts[0, 2] == 1
        assert stats.counts[1, 0] == 1
        assert stats.counts[2, 1] == 1
        assert stats.counts.sum() == 3

    def test_empty_stats(self):
        """No trials gives zeroed metrics."""
        stats = ShuffleStatistics(size=4)
        assert stats.chi_square() == 0.0
        assert stats.max_deviation() == 0.0
        assert stats.frequencies().sum() == 0.0

    def test_perfectly_uniform_counts(self):
        """Evenly spread counts give zero chi-square."""
        stats = ShuffleStatistics(size=2)
        stats.record([0, 1])
        stats.record([1, 0])

        assert stats.chi_square() == 0.0
        assert stats.degrees_of_freedom == 1
        assert stats.max_deviation() == 0.0

    def test_constant_permutation_is_not_uniform(self):
        """A fixed order is flagged as non-uniform."""
        stats = ShuffleStatistics(size=5)
        for _ in range(1000):
            stats.record([0, 1, 2, 3, 4])

        assert not stats.is_uniform()
        assert stats.max_deviation() == pytest.approx(0.8)

    def test_plot_heatmap(self, tmp_path):
        """Heatmap is saved to disk."""
        matplotlib.use("Agg")

        stats = ShuffleStatistics(size=4)
        stats.record([3, 2, 1, 0])
        path = tmp_path / "plots" / "heatmap.png"

        stats.plot_heatmap(save_path=path)

        assert path.exists()


class TestRunShuffleTrials:
    """Test repeated shuffles against the uniform expectation."""

    def test_rows_and_columns_sum_to_trials(self):
        """Every row and column sums to the trial count."""
        stats = run_shuffle_trials(size=10, trials=500, seed=3)

        assert stats.trials == 500
        assert (stats.counts.sum(axis=0) == 500).all()
        assert (stats.counts.sum(axis=1) == 500).all()

    def test_small_deck_positions_are_uniform(self):
        """Three card positions come out even."""
        stats = run_shuffle_trials(size=3, trials=6000, seed=42)

        # Each cell expects 2000; std is about 37.
        assert np.abs(stats.counts - 2000).max() < 250
        assert stats.is_uniform(z=6.0)

    def test_full_deck_is_uniform(self):
        """A full deck shuffle passes the uniformity check."""
        stats = run_shuffle_trials(size=52, trials=5000, seed=7)
        assert stats.is_uniform(z=6.0)

    def test_reproducible_for_seed(self):
        """Same seed gives the same counts."""
        first = run_shuffle_trials(size=8, trials=200, seed=9)
        second = run_shuffle_trials(size=8, trials=200, seed=9)
        np.testing.assert_array_equal(first.counts, second.counts)

    def test_uses_given_shuffle(self):
        """A supplied shuffle is used as is."""
        shuffle = Shuffle(seed=1)
        stats = run_shuffle_trials(size=5, trials=10, shuffle=shuffle, seed=999)

        expected = ShuffleStatistics(size=5)
        reference = Shuffle(seed=1)
        for _ in range(10):
            expected.record(reference.permutation(5))

        np.testing.assert_array_equal(stats.counts, expected.counts)

    def test_progress_bar(self):
        """Trials run with the progress bar shown."""
        stats = run_shuffle_trials(size=4, trials=20, seed=1, show_progress=True)
        assert stats.trials == 20
