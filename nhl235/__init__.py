"""Toolkit for fetching and printing NHL results in teletext style."""

from .aggregator import aggregate, disambiguate, display_names
from .client import FetchError, fetch_scores
from .feed import FeedError, parse_feed
from .models import Game, Goal, Player, Stat
from .render import RenderOptions, print_games, render_game
from .transform import transform_game, transform_games

__version__ = "1.0.0"

__all__ = [
    "FeedError",
    "FetchError",
    "Game",
    "Goal",
    "Player",
    "RenderOptions",
    "Stat",
    "aggregate",
    "disambiguate",
    "display_names",
    "fetch_scores",
    "parse_feed",
    "print_games",
    "render_game",
    "transform_game",
    "transform_games",
]
