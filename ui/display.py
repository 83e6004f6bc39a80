"""Display utilities for terminal deck output."""

from rich.table import Table

from deck.cards import Card, Suit
from simulation.statistics import ShuffleStatistics


SUIT_COLORS = {
    Suit.HEART: "red",
    Suit.DIAMOND: "red",
    Suit.CLUB: "white",
    Suit.SPADE: "white",
    Suit.JOKER: "magenta",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}]{card}[/{color}]"


def render_deck(cards: list[Card], title: str = "Deck") -> Table:
    """Render a deck as a numbered table, top card first."""
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Card")

    for position, card in enumerate(cards, 1):
        table.add_row(str(position), render_card(card))

    return table


def render_stats(stats: ShuffleStatistics) -> Table:
    """Render a shuffle statistics summary."""
    table = Table(title="Shuffle Uniformity", show_header=False)
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Cards", str(stats.size))
    table.add_row("Trials", f"{stats.trials:,}")
    table.add_row("Expected per cell", f"{stats.expected:.1f}")
    table.add_row("Chi-square", f"{stats.chi_square():.2f}")
    table.add_row("Degrees of freedom", str(stats.degrees_of_freedom))
    table.add_row("z-score", f"{stats.z_score():+.2f}")
    table.add_row("Max deviation", f"{stats.max_deviation():.4f}")

    verdict = "[green]uniform[/green]" if stats.is_uniform() else "[red]not uniform[/red]"
    table.add_row("Verdict", verdict)

    return table
