"""Aggregation helpers for highlighted player statistics."""
from __future__ import annotations

from collections import Counter, defaultdict
from typing import Collection, Dict, Iterable, List

from .models import Goal, Player, Stat


def aggregate(goals: Iterable[Goal], highlights: Collection[str]) -> Dict[Player, Stat]:
    """Count goals and assists for players whose last name is highlighted.

    Shootout goals are not part of a player's stats and are skipped.
    """

    stats: Dict[Player, Stat] = {}
    for goal in goals:
        if goal.is_shootout:
            continue
        if goal.scorer.last_name in highlights:
            stats.setdefault(goal.scorer, Stat()).goals += 1
        for assist in goal.assists:
            if assist.last_name in highlights:
                stats.setdefault(assist, Stat()).assists += 1
    return stats


def display_names(players: Iterable[Player]) -> Dict[Player, str]:
    """Map each player to the last name, or to the initialed form when another
    player in *players* shares it.

    Namesakes whose initialed forms are still equal get their team appended,
    e.g. ``S. Aho (CAR)``.
    """

    by_last_name: defaultdict[str, set[Player]] = defaultdict(set)
    unique: List[Player] = []
    for player in players:
        if player not in by_last_name[player.last_name]:
            unique.append(player)
        by_last_name[player.last_name].add(player)

    initialed = Counter(player.initialed for player in unique)
    names: Dict[Player, str] = {}
    for player in unique:
        if len(by_last_name[player.last_name]) == 1:
            names[player] = player.last_name
        elif initialed[player.initialed] == 1:
            names[player] = player.initialed
        else:
            names[player] = f"{player.initialed} ({player.team})"
    return names


def disambiguate(stats: Dict[Player, Stat]) -> Dict[str, Stat]:
    names = display_names(stats)
    return {names[player]: stat for player, stat in stats.items()}


def format_stats(named: Dict[str, Stat]) -> str:
    return "({})".format(", ".join(f"{name} {stat}" for name, stat in named.items()))
