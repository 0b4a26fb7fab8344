import datetime

import pytest

from footleague.league import League, TeamNotFoundError
from footleague.models import Match, Player, Stadium, Team


@pytest.fixture
def league():
    result = League()
    result.add_team(Team("Alpha", "Moscow"))
    result.add_team(Team("Beta", "Kazan"))
    return result


def test_find_team_returns_first_match(league):
    duplicate = Team("Alpha", "Omsk")
    league.add_team(duplicate)
    assert league.find_team("Alpha").city == "Moscow"
    assert league.find_team("Gamma") is None


def test_add_to_unknown_team_raises(league):
    with pytest.raises(TeamNotFoundError) as info:
        league.add_player("Gamma", Player("Ivanov", "Ivan"))
    assert info.value.name == "Gamma"
    with pytest.raises(TeamNotFoundError):
        league.add_stadium("Gamma", Stadium("Arena"))
    with pytest.raises(TeamNotFoundError):
        league.add_match("Gamma", Match("Gamma", "Alpha", datetime.date(2024, 1, 1)))
    assert all(not t.players and not t.stadiums and not t.matches for t in league.teams)


def test_find_stadium_across_teams(league):
    arena = Stadium("Arena", "Kazan", 45000, 1000.0)
    league.add_stadium("Beta", arena)
    assert league.find_stadium("Arena") is arena
    assert league.find_stadium("Nowhere") is None


def test_team_matches_rows(league):
    league.add_match("Alpha", Match("Alpha", "Beta", datetime.date(2024, 3, 5), "2:1"))
    assert league.team_matches("Alpha") == [["05.03.2024", "Beta", "2:1"]]
    assert league.team_matches("Beta") == []


def test_team_matches_unknown_team(league):
    with pytest.raises(TeamNotFoundError):
        league.team_matches("Gamma")


def test_players_on_date_lists_teams_that_played(league):
    day = datetime.date(2024, 5, 1)
    league.add_player("Alpha", Player("Ivanov", "Ivan", number=7))
    league.add_player("Beta", Player("Petrov", "Petr", number=9))
    league.add_match("Alpha", Match("Alpha", "Beta", day, "0:0"))
    league.add_match("Beta", Match("Beta", "Alpha", datetime.date(2024, 5, 2), "1:1"))
    assert league.players_on_date("Arena", day) == [["7", "Ivanov"]]


def test_players_on_date_repeats_per_match(league):
    day = datetime.date(2024, 5, 1)
    league.add_player("Alpha", Player("Ivanov", "Ivan", number=7))
    league.add_match("Alpha", Match("Alpha", "Beta", day, "0:0"))
    league.add_match("Alpha", Match("Alpha", "Beta", day, "1:0"))
    rows = league.players_on_date("", day)
    assert rows == [["7", "Ivanov"], ["7", "Ivanov"]]


def test_top_scorers_picks_maximum(league):
    league.add_player("Alpha", Player("Ivanov", "Ivan", goals_scored=4))
    league.add_player("Beta", Player("Petrov", "Petr", goals_scored=4))
    league.add_player("Beta", Player("Sidorov", "Sidor", goals_scored=1))
    assert league.top_scorers() == [["Ivanov", "Ivan", "4"], ["Petrov", "Petr", "4"]]


def test_top_scorers_without_goals_lists_everyone(league):
    league.add_player("Alpha", Player("Ivanov", "Ivan"))
    league.add_player("Beta", Player("Petrov", "Petr"))
    assert [row[0] for row in league.top_scorers()] == ["Ivanov", "Petrov"]


def test_top_scorers_empty_league():
    assert League().top_scorers() == []