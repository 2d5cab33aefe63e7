import json
from pathlib import Path

import pytest

from nhl235.feed import FeedError, parse_feed, parse_game_record, parse_goal_record
from nhl235.models import SHOOTOUT_MINUTE, Player
from nhl235.transform import (
    format_minute,
    game_special_marker,
    is_special,
    split_name,
    transform_game,
    transform_games,
)

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def make_goal(period, minute=None, team="CHI", player="Patrick Kane", assists=()):
    raw = {
        "team": team,
        "period": period,
        "scorer": {"player": player, "seasonTotal": 10},
        "assists": [{"player": name, "seasonTotal": 1} for name in assists],
    }
    if minute is not None:
        raw["min"] = minute
    return parse_goal_record(raw)


def make_game(goals=None, scores=None, teams=True, state="FINAL"):
    raw = {
        "status": {"state": state},
        "scores": scores if scores is not None else {"PIT": 1, "TOR": 0},
    }
    if teams:
        raw["teams"] = {"home": {"abbreviation": "TOR"}, "away": {"abbreviation": "PIT"}}
    if goals is not None:
        raw["goals"] = goals
    return parse_game_record(raw)


@pytest.fixture
def games():
    payload = json.loads((FIXTURE_DIR / "scores_latest.json").read_text())
    return transform_games(parse_feed(payload))


def test_minutes_are_converted_correctly():
    assert format_minute(3, "1") == 3
    assert format_minute(13, "2") == 33
    assert format_minute(5, "3") == 45
    assert format_minute(12, "4") == 72
    assert format_minute(5, "5") == 85
    assert format_minute(5, "6") == 105
    assert format_minute(4, "OT") == 64
    assert format_minute(0, "1") == 0
    assert format_minute(0, "2") == 20
    assert format_minute(0, "3") == 40
    assert format_minute(0, "OT") == 60


def test_shootout_minute_is_fixed():
    assert format_minute(None, "SO") == SHOOTOUT_MINUTE
    assert format_minute(3, "SO") == 65


def test_missing_minute_is_a_feed_error():
    with pytest.raises(FeedError):
        format_minute(None, "2")
    with pytest.raises(FeedError):
        format_minute(None, "OT")


def test_unknown_period_is_a_feed_error():
    with pytest.raises(FeedError):
        format_minute(3, "SP")
    with pytest.raises(FeedError):
        format_minute(3, "0")


def test_is_special():
    assert is_special("1") is False
    assert is_special("2") is False
    assert is_special("3") is False
    assert is_special("OT") is True
    assert is_special("SO") is True
    assert is_special("4") is True
    assert is_special("10") is True
    # unexpected literals are treated as extraordinary
    assert is_special("SP") is True


def test_game_special_marker_follows_last_goal():
    assert game_special_marker([]) == ""
    assert game_special_marker([make_goal("1", 3)]) == ""
    assert game_special_marker([make_goal("1", 3), make_goal("OT", 2)]) == "ot"
    assert game_special_marker([make_goal("1", 3), make_goal("SO")]) == "so"
    assert game_special_marker([make_goal("4", 12)]) == "ot"
    assert game_special_marker([make_goal("OT", 1), make_goal("3", 12)]) == ""


def test_it_extracts_player_name_correctly():
    assert split_name("Olli Maatta", "CHI").last_name == "Maatta"
    assert split_name("James van Riemsdyk", "PHI").last_name == "van Riemsdyk"
    assert split_name("James van Riemsdyk", "PHI").first_name == "James"
    assert split_name("Sidney", "PIT") == Player("Sidney", "", "PIT")


def test_it_parses_full_live_game_data_correctly(games):
    live = games[0]

    assert live.home == "CBJ"
    assert live.away == "TBL"
    assert live.score == "4-2"
    assert live.status == "LIVE"
    assert live.special == ""
    assert len(live.goals) == 6
    assert [goal.minute for goal in live.goals] == [4, 4, 10, 19, 19, 46]
    assert not any(goal.special for goal in live.goals)


def test_goal_players_carry_goal_team(games):
    goal = games[0].goals[1]

    assert goal.scorer == Player("Nick", "Foligno", "CBJ")
    assert goal.assists == (
        Player("Cam", "Atkinson", "CBJ"),
        Player("Michael", "Del Zotto", "CBJ"),
    )


def test_it_parses_full_overtime_game_data_correctly(games):
    overtime = games[1]

    assert overtime.home == "TOR"
    assert overtime.away == "PIT"
    assert overtime.score == "1-2"
    assert len(overtime.goals) == 3
    assert overtime.status == "FINAL"
    assert overtime.special == "ot"
    assert overtime.goals[-1].minute == 63
    assert overtime.goals[-1].special is True
    assert overtime.goals[-1].assists == ()


def test_shootout_game(games):
    shootout = games[2]

    assert shootout.score == "1-2"
    assert shootout.special == "so"
    assert shootout.goals[-1].minute == SHOOTOUT_MINUTE
    assert shootout.shootout_winner.scorer.last_name == "Pettersson"


def test_it_parses_a_playoffs_game_with_overtime_correctly(games):
    playoff = games[3]

    assert playoff.score == "2-1"
    assert playoff.special == "ot"
    assert playoff.goals[-1].minute == 82
    assert playoff.playoff_series == {"round": 1, "wins": {"BOS": 2, "FLA": 1}}


def test_game_without_teams_is_dropped_without_stopping_the_batch(games):
    assert len(games) == 5
    assert games[4] is None
    assert all(game is not None for game in games[:4])


def test_it_parses_a_game_with_no_goals_correctly():
    game = transform_game(make_game(scores={"PIT": 0, "TOR": 0}, state="LIVE"))

    assert game.score == "0-0"
    assert game.goals == []
    assert game.special == ""
    assert game.playoff_series is None


def test_game_with_team_missing_from_scores_is_dropped():
    assert transform_game(make_game(scores={"PIT": 1})) is None


def test_quotes_are_stripped_from_goal_team():
    game = transform_game(make_game(goals=[{"team": '"TOR"', "period": "1", "min": 5, "scorer": {"player": "Mitch Marner"}}]))

    assert game.goals[0].team == "TOR"
    assert game.goals[0].scorer.team == "TOR"


def test_goal_without_minute_aborts_transformation():
    record = make_game(goals=[{"team": "TOR", "period": "2", "scorer": {"player": "Mitch Marner"}}])

    with pytest.raises(FeedError):
        transform_game(record)
