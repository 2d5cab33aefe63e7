"""Data models for game results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Shootout goals have no game clock, they are pinned to this minute instead.
SHOOTOUT_MINUTE = 65

STATUS_LIVE = "LIVE"
STATUS_FINAL = "FINAL"
STATUS_POSTPONED = "POSTPONED"

SPECIAL_NONE = ""
SPECIAL_OVERTIME = "ot"
SPECIAL_SHOOTOUT = "so"


@dataclass(frozen=True)
class Player:
    """A player as named in the feed, tied to the team of the goal."""

    first_name: str
    last_name: str
    team: str

    @property
    def initialed(self) -> str:
        if not self.first_name:
            return self.last_name
        return f"{self.first_name[0]}. {self.last_name}"


@dataclass(frozen=True)
class Goal:
    scorer: Player
    minute: int
    team: str
    special: bool = False
    assists: Tuple[Player, ...] = ()

    @property
    def is_shootout(self) -> bool:
        return self.minute == SHOOTOUT_MINUTE


@dataclass(frozen=True)
class Game:
    """Display-ready representation of one game in the feed."""

    home: str
    away: str
    score: str
    status: str
    goals: List[Goal] = field(default_factory=list)
    special: str = SPECIAL_NONE
    playoff_series: Optional[Dict[str, Any]] = field(default=None, repr=False)

    def goals_for(self, team: str) -> List[Goal]:
        """Goals for *team* that belong in the paired score body."""

        return [
            goal
            for goal in self.goals
            if goal.team == team
            and (not goal.is_shootout or self.special == SPECIAL_OVERTIME)
        ]

    @property
    def shootout_winner(self) -> Optional[Goal]:
        if self.special != SPECIAL_SHOOTOUT or not self.goals:
            return None
        return self.goals[-1]


@dataclass
class Stat:
    """Goals and assists tallied for one player within a single game."""

    goals: int = 0
    assists: int = 0

    def __str__(self) -> str:
        return f"{self.goals}+{self.assists}"
