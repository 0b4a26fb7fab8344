"""The league: a collection of teams and the queries run over it."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable
from itertools import chain

from footleague.models import Match, Player, Stadium, Team


class TeamNotFoundError(LookupError):
    """Raised when no team carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"team not found: {name!r}")
        self.name = name


def format_date(day: _dt.date) -> str:
    """Render a date as dd.MM.yyyy."""
    return f"{day.day:02d}.{day.month:02d}.{day.year:04d}"


class League:
    """All known teams and the records attached to them."""

    def __init__(self, teams: Iterable[Team] | None = None) -> None:
        self.teams: list[Team] = list(teams or [])

    def add_team(self, team: Team) -> Team:
        self.teams.append(team)
        return team

    def _require_team(self, name: str) -> Team:
        team = self.find_team(name)
        if team is None:
            raise TeamNotFoundError(name)
        return team

    def add_player(self, team_name: str, player: Player) -> None:
        self._require_team(team_name).players.append(player)

    def add_stadium(self, team_name: str, stadium: Stadium) -> None:
        self._require_team(team_name).stadiums.append(stadium)

    def add_match(self, team_name: str, match: Match) -> None:
        self._require_team(team_name).matches.append(match)

    def find_team(self, name: str) -> Team | None:
        """Return the first team with this name, or None."""
        return next((team for team in self.teams if team.name == name), None)

    def find_stadium(self, name: str) -> Stadium | None:
        """Return the first stadium with this name across all teams, or None."""
        return next(
            (s for team in self.teams for s in team.stadiums if s.name == name),
            None,
        )

    def team_matches(self, team_name: str) -> list[list[str]]:
        """Dates, opponents and scores of a team's matches."""
        team = self._require_team(team_name)
        return [[format_date(m.date), m.team2, m.score] for m in team.matches]

    def players_on_date(self, stadium_name: str, day: _dt.date) -> list[list[str]]:
        """Numbers and last names of players of every team that played on the day.

        Matches do not record a stadium, so the stadium name does not narrow
        the result; a team listed with several matches that day appears once
        per match.
        """
        return [
            [str(player.number), player.last_name]
            for team in self.teams
            for match in team.matches
            if match.date == day
            for player in team.players
        ]

    def top_scorers(self) -> list[list[str]]:
        """Players who scored the most goals."""
        everyone = [player for team in self.teams for player in team.players]
        best = max(chain([0], (p.goals_scored for p in everyone)))
        return [
            [p.last_name, p.first_name, str(p.goals_scored)]
            for p in everyone
            if p.goals_scored == best
        ]