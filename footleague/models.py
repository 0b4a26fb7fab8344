"""Records kept by the league: teams with their players, stadiums and matches."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field


@dataclass
class Player:
    """A player registered with a team."""

    last_name: str
    first_name: str
    middle_name: str = ""
    age: int = 0
    position: str = ""
    number: int = 0
    goals_scored: int = 0


@dataclass
class Stadium:
    """A stadium a team plays at."""

    name: str
    city: str = ""
    capacity: int = 0
    ticket_price: float = 0.0


@dataclass
class Match:
    """A match between two teams on a given day."""

    team1: str
    team2: str
    date: _dt.date
    score: str = ""


@dataclass
class Team:
    """A team with its coach, ranking and the records attached to it."""

    name: str
    city: str = ""
    coach_last_name: str = ""
    coach_first_name: str = ""
    coach_middle_name: str = ""
    ranking: int = 0
    players: list[Player] = field(default_factory=list)
    matches: list[Match] = field(default_factory=list)
    stadiums: list[Stadium] = field(default_factory=list)