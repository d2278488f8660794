"""Visualization theme presets for tour figures.

Themes are frozen dataclasses that group all styling constants together so
``render_tour`` can swap palettes without touching drawing code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of tour-figure style tokens."""

    visited_cmap: str = "viridis"
    unvisited_color: str = "#F0F0F0"
    grid_line_color: str = "#CCCCCC"
    path_color: str = "#212121"
    start_color: str = "#4CAF50"
    end_color: str = "#FF5722"
    label_color: str = "#FFFFFF"
    font_size: int = 7


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    visited_cmap="Greys",
    path_color="#B71C1C",
    label_color="#000000",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"theme must be one of {valid}") from exc
