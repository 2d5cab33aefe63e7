"""Turn parsed feed records into display-ready games."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .feed import FeedError, GameRecord, GoalRecord, ScoresResponse
from .models import (
    SHOOTOUT_MINUTE,
    SPECIAL_NONE,
    SPECIAL_OVERTIME,
    SPECIAL_SHOOTOUT,
    Game,
    Goal,
    Player,
)

logger = logging.getLogger(__name__)

PERIOD_MINUTES = 20
REGULATION_PERIODS = ("1", "2", "3")


def format_minute(minute: Optional[int], period: str) -> int:
    """Convert a period and a minute within it (0-19) into a game minute.

    Periods are "1".."N" or the literals "OT" and "SO". Shootout goals have no
    clock and are pinned to :data:`SHOOTOUT_MINUTE`.
    """

    if period == "SO":
        return SHOOTOUT_MINUTE
    if minute is None:
        raise FeedError(f"Goal in period {period!r} has no minute")
    if period == "OT":
        return 3 * PERIOD_MINUTES + minute
    try:
        number = int(period)
    except ValueError as exc:
        raise FeedError(f"Unrecognised period {period!r}") from exc
    if number < 1:
        raise FeedError(f"Unrecognised period {period!r}")
    return PERIOD_MINUTES * (number - 1) + minute


def is_special(period: str) -> bool:
    """True for overtime and shootout goals, including playoff overtimes.

    Anything that is not a period number counts as special.
    """

    try:
        return int(period) >= 4
    except ValueError:
        return True


def game_special_marker(goals: Sequence[GoalRecord]) -> str:
    if not goals:
        return SPECIAL_NONE
    period = goals[-1].period
    if period in REGULATION_PERIODS:
        return SPECIAL_NONE
    if period == "SO":
        return SPECIAL_SHOOTOUT
    # OT, and numbered playoff overtimes from "4" upwards
    return SPECIAL_OVERTIME


def split_name(full_name: str, team: str) -> Player:
    """Split a feed name into first name and the rest as last name.

    Players with several first names end up with part of it in the last name.
    The feed carries no finer structure so that is accepted.
    """

    first, _, last = full_name.strip().partition(" ")
    return Player(first_name=first, last_name=last, team=team)


def transform_goal(record: GoalRecord) -> Goal:
    team = record.team.replace('"', "")
    return Goal(
        scorer=split_name(record.scorer.player, team),
        assists=tuple(split_name(assist.player, team) for assist in record.assists or ()),
        minute=format_minute(record.min, record.period),
        special=is_special(record.period),
        team=team,
    )


def transform_game(record: GameRecord) -> Optional[Game]:
    """Build a :class:`Game` or return ``None`` when the teams are unknown."""

    if record.teams is None:
        logger.info("Skipping game without teams")
        return None

    home = record.teams.home.abbreviation
    away = record.teams.away.abbreviation
    if home not in record.scores or away not in record.scores:
        logger.info("Skipping %s-%s: score missing from feed", home, away)
        return None

    goal_records = record.goals or []
    return Game(
        home=home,
        away=away,
        score=f"{record.scores[home]}-{record.scores[away]}",
        goals=[transform_goal(goal) for goal in goal_records],
        status=record.status.state,
        special=game_special_marker(goal_records),
        playoff_series=record.current_stats.playoff_series,
    )


def transform_games(response: ScoresResponse) -> List[Optional[Game]]:
    games = [transform_game(record) for record in response.games]
    logger.debug(
        "Transformed %d of %d games",
        sum(game is not None for game in games),
        len(games),
    )
    return games
