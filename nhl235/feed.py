"""Typed records for the nhl-score-api JSON feed.

The parser is tolerant to unknown keys and to missing optional blocks. Only the
fields the rest of the pipeline computes with are required; everything else
defaults to ``None`` or an empty mapping.
"""
from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


class FeedError(ValueError):
    """Raised when the scores feed cannot be interpreted."""


@dataclass(frozen=True)
class DateRecord:
    raw: Optional[str] = None
    pretty: Optional[str] = None


@dataclass(frozen=True)
class ProgressRecord:
    current_period: Optional[int] = None
    current_period_ordinal: Optional[str] = None
    time_remaining: Optional[str] = None


@dataclass(frozen=True)
class StatusRecord:
    state: str
    progress: Optional[ProgressRecord] = None


@dataclass(frozen=True)
class PlayerRecord:
    player: str
    season_total: Optional[int] = None


@dataclass(frozen=True)
class GoalRecord:
    period: str
    team: str
    scorer: PlayerRecord
    assists: Optional[List[PlayerRecord]] = None
    min: Optional[int] = None
    sec: Optional[int] = None
    empty_net: Optional[bool] = None
    strength: Optional[str] = None


@dataclass(frozen=True)
class TeamRecord:
    abbreviation: str
    id: Optional[int] = None
    location_name: Optional[str] = None
    short_name: Optional[str] = None
    team_name: Optional[str] = None


@dataclass(frozen=True)
class TeamsRecord:
    home: TeamRecord
    away: TeamRecord


@dataclass(frozen=True)
class StatsRecord:
    records: Dict[str, Any] = field(default_factory=dict)
    streaks: Dict[str, Any] = field(default_factory=dict)
    standings: Dict[str, Any] = field(default_factory=dict)
    playoff_series: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class GameRecord:
    status: StatusRecord
    scores: Dict[str, Any]
    teams: Optional[TeamsRecord]
    goals: Optional[List[GoalRecord]] = None
    start_time: Optional[str] = None
    pre_game_stats: StatsRecord = field(default_factory=StatsRecord)
    current_stats: StatsRecord = field(default_factory=StatsRecord)


@dataclass(frozen=True)
class ScoresResponse:
    games: List[GameRecord]
    date: DateRecord = field(default_factory=DateRecord)
    errors: Optional[Dict[str, Any]] = None


def _as_mapping(raw: Any) -> Dict[str, Any]:
    return dict(raw) if isinstance(raw, Mapping) else {}


def _as_optional_int(raw: Any, *, field: str) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise FeedError(f"Expected a number for '{field}', got {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise FeedError(f"Could not parse integer for '{field}' from {raw!r}") from exc


def _lenient_int(raw: Any) -> Optional[int]:
    """Like :func:`_as_optional_int` but gives ``None`` for anything unparseable."""

    value = coerce_score(raw)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def coerce_score(raw: Any) -> Any:
    """Return *raw* as an ``int`` when it is numeric or a numeric string."""

    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        with contextlib.suppress(ValueError):
            return int(raw.strip())
    return raw


def _parse_progress(raw: Any) -> Optional[ProgressRecord]:
    if not isinstance(raw, Mapping):
        return None
    remaining = raw.get("currentPeriodTimeRemaining")
    pretty = remaining.get("pretty") if isinstance(remaining, Mapping) else None
    period = raw.get("currentPeriod")
    return ProgressRecord(
        current_period=period if isinstance(period, int) else None,
        current_period_ordinal=raw.get("currentPeriodOrdinal"),
        time_remaining=pretty,
    )


def _parse_status(raw: Any) -> StatusRecord:
    status = _as_mapping(raw)
    return StatusRecord(
        state=str(status.get("state") or ""),
        progress=_parse_progress(status.get("progress")),
    )


def _parse_player(raw: Any, *, field: str) -> PlayerRecord:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("player"), str):
        raise FeedError(f"Missing player name for '{field}'")
    return PlayerRecord(
        player=raw["player"],
        season_total=_lenient_int(raw.get("seasonTotal")),
    )


def parse_goal_record(raw: Any) -> GoalRecord:
    """Parse a single entry of a game's ``goals`` array."""

    if not isinstance(raw, Mapping):
        raise FeedError(f"Goal entry is not an object: {raw!r}")
    period = raw.get("period")
    if period is None or isinstance(period, bool):
        raise FeedError("Goal entry has no period")
    team = raw.get("team")
    if not isinstance(team, str) or not team:
        raise FeedError("Goal entry has no team")

    assists = raw.get("assists")
    return GoalRecord(
        period=str(period),
        team=team,
        scorer=_parse_player(raw.get("scorer"), field="scorer"),
        assists=(
            [_parse_player(item, field="assists") for item in assists]
            if isinstance(assists, list)
            else None
        ),
        min=_as_optional_int(raw.get("min"), field="min"),
        sec=_lenient_int(raw.get("sec")),
        empty_net=raw.get("emptyNet"),
        strength=raw.get("strength"),
    )


def _parse_team(raw: Any) -> Optional[TeamRecord]:
    if not isinstance(raw, Mapping):
        return None
    abbreviation = raw.get("abbreviation")
    if not isinstance(abbreviation, str) or not abbreviation:
        return None
    team_id = raw.get("id")
    return TeamRecord(
        abbreviation=abbreviation,
        id=team_id if isinstance(team_id, int) else None,
        location_name=raw.get("locationName"),
        short_name=raw.get("shortName"),
        team_name=raw.get("teamName"),
    )


def _parse_teams(raw: Any) -> Optional[TeamsRecord]:
    if not isinstance(raw, Mapping):
        return None
    home = _parse_team(raw.get("home"))
    away = _parse_team(raw.get("away"))
    if home is None or away is None:
        return None
    return TeamsRecord(home=home, away=away)


def _parse_stats(raw: Any) -> StatsRecord:
    stats = _as_mapping(raw)
    series = stats.get("playoffSeries")
    return StatsRecord(
        records=_as_mapping(stats.get("records")),
        streaks=_as_mapping(stats.get("streaks")),
        standings=_as_mapping(stats.get("standings")),
        playoff_series=dict(series) if isinstance(series, Mapping) else None,
    )


def parse_game_record(raw: Any) -> GameRecord:
    """Parse one entry of the feed's ``games`` array.

    Missing ``teams`` or ``scores`` blocks are not an error here; the record is
    kept with ``teams=None`` / empty scores and the transformer drops it.
    Malformed goal entries raise :class:`FeedError`.
    """

    if not isinstance(raw, Mapping):
        raise FeedError(f"Game entry is not an object: {raw!r}")

    goals = raw.get("goals")
    start_time = raw.get("startTime")
    return GameRecord(
        status=_parse_status(raw.get("status")),
        scores={key: coerce_score(value) for key, value in _as_mapping(raw.get("scores")).items()},
        teams=_parse_teams(raw.get("teams")),
        goals=[parse_goal_record(goal) for goal in goals] if isinstance(goals, list) else None,
        start_time=start_time if isinstance(start_time, str) else None,
        pre_game_stats=_parse_stats(raw.get("preGameStats")),
        current_stats=_parse_stats(raw.get("currentStats")),
    )


def parse_feed(payload: Any) -> ScoresResponse:
    """Parse the decoded JSON document returned by the scores endpoint."""

    if not isinstance(payload, Mapping):
        raise FeedError("Feed document is not a JSON object")
    games = payload.get("games")
    if not isinstance(games, list):
        raise FeedError("Feed document has no 'games' list")

    date = _as_mapping(payload.get("date"))
    errors = payload.get("errors")
    response = ScoresResponse(
        games=[parse_game_record(game) for game in games],
        date=DateRecord(raw=date.get("raw"), pretty=date.get("pretty")),
        errors=dict(errors) if isinstance(errors, Mapping) else None,
    )
    logger.debug("Parsed %d games for %s", len(response.games), response.date.raw)
    return response
