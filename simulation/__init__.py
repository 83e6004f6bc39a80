"""Statistical checks for deck shuffling."""

from simulation.runner import run_shuffle_trials
from simulation.statistics import ShuffleStatistics
