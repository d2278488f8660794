"""Visualization layer: visit-order grids, themes and tour figures."""

from tile_tour.viz.grid import UNVISITED, format_visit_grid, visit_order_grid
from tile_tour.viz.render import render_tour
from tile_tour.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "UNVISITED",
    "format_visit_grid",
    "get_theme",
    "render_tour",
    "visit_order_grid",
]
