"""Rich rendering helpers for cards and decks."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cards import Card, Color
from .deck import Deck

__all__ = ["format_card", "format_cards", "render_card", "render_deck"]

_COLOR_STYLES = {
    Color.RED: "red",
    Color.BLACK: "cyan",
}
_JOKER_STYLE = "magenta"


def _style_for(card: Card) -> str:
    if card.is_joker:
        return _JOKER_STYLE
    return _COLOR_STYLES[card.color]


def format_card(card: Card) -> str:
    """Return a Rich markup label for ``card``."""

    style = _style_for(card)
    return f"[{style}]{card}[/{style}]"


def format_cards(cards: Iterable[Card]) -> str:
    labels = [format_card(card) for card in cards]
    if not labels:
        return "—"
    return " ".join(labels)


def render_card(card: Card) -> Text:
    """Return the boxed ASCII face of ``card`` as styled text."""

    return Text(card.display_ascii(), style=_style_for(card))


def render_deck(deck: Deck, *, title: str = "Deck") -> RenderableType:
    """Return a Rich panel summarising ``deck``: size, top and bottom card, then every card."""

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"[cyan]Cards[/cyan]: {len(deck)}")
    top, bottom = deck.peek(), deck.peek_bottom()
    grid.add_row(f"[cyan]Top[/cyan]: {format_card(top) if top is not None else '—'}")
    grid.add_row(f"[cyan]Bottom[/cyan]: {format_card(bottom) if bottom is not None else '—'}")
    body = Group(grid, Text.from_markup(format_cards(deck)))
    return Panel(body, title=title, box=box.ROUNDED, padding=(0, 1), border_style="blue")
