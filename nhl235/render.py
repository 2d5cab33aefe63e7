"""Teletext-style text output for games.

Rendering is split in two: :func:`render_game` and :func:`render_games` are
pure and return lines, :func:`print_games` decides whether colours are active
and writes to a stream. Colours need both the option and a terminal; the
terminal query can be injected for tests.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import Callable, Collection, Dict, List, Mapping, Optional, Sequence, TextIO

from .aggregator import aggregate, disambiguate, display_names, format_stats
from .models import STATUS_FINAL, STATUS_LIVE, STATUS_POSTPONED, Game, Goal, Player
from .teams import city_name

ANSI_CODES = {
    "green": "\033[32m",
    "yellow": "\033[33m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}
ANSI_RESET = "\033[0m"

NO_GAMES = "No games today."
NAME_WIDTH = 15
SCORE_WIDTH = 6
POSTPONED_LABEL = "POSTP."


@dataclass(frozen=True)
class RenderOptions:
    use_colors: bool = True
    show_highlights: bool = False
    show_stats: bool = False


def paint(text: str, color: Optional[str], colors: bool) -> str:
    if not colors or not color:
        return text
    return f"{ANSI_CODES[color]}{text}{ANSI_RESET}"


def _score_field(game: Game) -> str:
    if game.status == STATUS_LIVE:
        return game.score
    if game.status == STATUS_FINAL:
        return f"{game.special} {game.score}"
    if game.status == STATUS_POSTPONED:
        return POSTPONED_LABEL
    return ""


def render_header(game: Game, colors: bool = False) -> str:
    teams = (
        f"{city_name(game.home):<{NAME_WIDTH}} {'-':>2} "
        f"{city_name(game.away):<{NAME_WIDTH}} {'':<2} "
    )
    score = f"{_score_field(game):>{SCORE_WIDTH}}"
    score_color = "green" if game.status == STATUS_FINAL else "white"
    return paint(teams, "white", colors) + paint(score, score_color, colors)


def goal_color(goal: Goal, options: RenderOptions, highlights: Collection[str]) -> str:
    if goal.special:
        return "magenta"
    if options.show_highlights and goal.scorer.last_name in highlights:
        return "yellow"
    return "cyan"


def _entry(goal: Goal, names: Dict[Player, str]) -> str:
    name = names.get(goal.scorer, goal.scorer.last_name)
    return f"{name:<{NAME_WIDTH}} {goal.minute:>2}"


def _blank_entry() -> str:
    return f"{'':<{NAME_WIDTH}} {'':>2}"


def render_game(
    game: Game,
    options: RenderOptions,
    highlights: Collection[str] = (),
    colors: bool = False,
) -> List[str]:
    """Return the lines for one game, blank separator lines included."""

    names = display_names(goal.scorer for goal in game.goals)

    def painted(goal: Goal, text: str) -> str:
        return paint(text, goal_color(goal, options, highlights), colors)

    def home_only(goal: Goal) -> str:
        return painted(goal, _entry(goal, names))

    def away_only(goal: Goal) -> str:
        return painted(goal, f"{_blank_entry()} {_entry(goal, names)}")

    lines = [render_header(game, colors)]

    pairs = zip_longest(game.goals_for(game.home), game.goals_for(game.away))
    for home, away in pairs:
        if home is not None and away is not None:
            lines.append(painted(home, _entry(home, names) + " ") + painted(away, _entry(away, names)))
        elif home is not None:
            lines.append(home_only(home))
        else:
            lines.append(away_only(away))

    # The game is tied before the deciding shootout goal, so it can go last.
    winner = game.shootout_winner
    if winner is not None:
        lines.append(home_only(winner) if winner.team == game.home else away_only(winner))
    lines.append("")

    if options.show_stats and highlights:
        stats = aggregate(game.goals, highlights)
        if stats:
            color = "yellow" if options.show_highlights else "white"
            lines.append(paint(format_stats(disambiguate(stats)), color, colors))
            lines.append("")

    if game.playoff_series is not None:
        wins = game.playoff_series.get("wins")
        if not isinstance(wins, Mapping):
            wins = {}
        series = f"Series {wins.get(game.home, 0)}-{wins.get(game.away, 0)}"
        lines.append(paint(series, "yellow", colors))
        lines.append("")

    return lines


def render_games(
    games: Sequence[Optional[Game]],
    options: RenderOptions,
    highlights: Collection[str] = (),
    colors: bool = False,
) -> List[str]:
    if not games:
        return [NO_GAMES]
    lines: List[str] = []
    for game in games:
        if game is not None:
            lines.extend(render_game(game, options, highlights, colors))
    return lines


def print_games(
    games: Sequence[Optional[Game]],
    options: RenderOptions,
    highlights: Collection[str] = (),
    stream: Optional[TextIO] = None,
    is_terminal: Optional[Callable[[], bool]] = None,
) -> None:
    if stream is None:
        stream = sys.stdout
    if is_terminal is None:
        is_terminal = getattr(stream, "isatty", lambda: False)
    colors = options.use_colors and is_terminal()
    for line in render_games(games, options, highlights, colors):
        print(line, file=stream)
