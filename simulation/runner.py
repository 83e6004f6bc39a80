"""Runner for repeated shuffle trials."""

import logging

from tqdm import tqdm

from deck.options import Shuffle
from simulation.statistics import ShuffleStatistics

logger = logging.getLogger(__name__)


def run_shuffle_trials(
    size: int,
    trials: int,
    shuffle: Shuffle | None = None,
    seed: int | None = None,
    show_progress: bool = False,
) -> ShuffleStatistics:
    """Draw ``trials`` permutations of ``size`` positions and tally them.

    Args:
        size: Number of cards being shuffled
        trials: Number of permutations to draw
        shuffle: Shuffle option to draw from (default: ``Shuffle(seed=seed)``)
        seed: Seed used when no shuffle is given
        show_progress: Show a tqdm progress bar

    Returns:
        ShuffleStatistics holding the positional counts
    """
    shuffle = shuffle or Shuffle(seed=seed)
    stats = ShuffleStatistics(size=size)

    iterator = range(trials)
    if show_progress:
        iterator = tqdm(iterator, desc="Shuffling", unit="decks")

    for _ in iterator:
        stats.record(shuffle.permutation(size))

    logger.info(
        "Ran %d shuffles of %d cards: chi2=%.2f dof=%d",
        trials,
        size,
        stats.chi_square(),
        stats.degrees_of_freedom,
    )
    return stats
