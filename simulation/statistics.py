"""Positional frequency statistics for shuffles."""

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np


@dataclass
class ShuffleStatistics:
    """Track where each source card lands across many shuffles.

    ``counts[i, j]`` is the number of trials in which output position ``i``
    received the card from source position ``j``. For a uniform shuffle
    every cell tends to ``trials / size``.
    """

    size: int
    trials: int = 0
    counts: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.counts = np.zeros((self.size, self.size), dtype=np.int64)

    def record(self, perm: list[int]) -> None:
        """Add one permutation draw (``perm[i]`` = source index at position i)."""
        self.counts[np.arange(self.size), perm] += 1
        self.trials += 1

    def frequencies(self) -> np.ndarray:
        """Counts normalised by trial count."""
        if self.trials == 0:
            return np.zeros_like(self.counts, dtype=np.float64)
        return self.counts / self.trials

    @property
    def expected(self) -> float:
        return self.trials / self.size if self.size else 0.0

    @property
    def degrees_of_freedom(self) -> int:
        return (self.size - 1) ** 2

    def chi_square(self) -> float:
        """Chi-square statistic against the uniform expectation."""
        if self.trials == 0 or self.size < 2:
            return 0.0
        expected = self.expected
        return float(((self.counts - expected) ** 2 / expected).sum())

    def z_score(self) -> float:
        """Normal approximation of the chi-square statistic."""
        dof = self.degrees_of_freedom
        if dof == 0:
            return 0.0
        return (self.chi_square() - dof) / np.sqrt(2 * dof)

    def is_uniform(self, z: float = 4.0) -> bool:
        """Whether the observed spread is consistent with a uniform shuffle."""
        return abs(self.z_score()) < z

    def max_deviation(self) -> float:
        """Largest absolute gap between any cell frequency and 1/size."""
        if self.trials == 0 or self.size == 0:
            return 0.0
        return float(np.abs(self.frequencies() - 1.0 / self.size).max())

    def plot_heatmap(
        self,
        save_path: str | Path | None = None,
        show: bool = False,
    ) -> None:
        """Plot positional frequencies as a heatmap."""
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(8, 7))
        image = ax.imshow(self.frequencies(), cmap="viridis", aspect="auto")
        fig.colorbar(image, ax=ax, label="Frequency")

        ax.set_xlabel("Source position")
        ax.set_ylabel("Shuffled position")
        ax.set_title(f"Shuffle positional frequency ({self.trials:,} trials)")

        if save_path:
            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            plt.savefig(save_path, dpi=150, bbox_inches="tight")
        elif show:
            plt.show()

        plt.close(fig)
