"""Interactive shell for entering league data and running the queries."""

from __future__ import annotations

import argparse
import cmd
import datetime as _dt
import math
import shlex
import sys
from typing import IO

from footleague.league import League
from footleague.models import Match, Player, Stadium, Team
from footleague.table import ResultTable

_PRICE_DECIMALS = 2


def parse_int(text: str, low: int, high: int) -> int:
    """Parse an integer and check that it lies within low..high."""
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"not an integer: {text!r}") from None
    if not low <= value <= high:
        raise ValueError(f"{value} is outside {low}..{high}")
    return value


def parse_float(text: str, low: float, high: float) -> float:
    """Parse a number with at most two decimals within low..high."""
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None
    mantissa = text.strip().lower().split("e", 1)[0]
    if "." in mantissa and len(mantissa.split(".", 1)[1]) > _PRICE_DECIMALS:
        raise ValueError(f"more than {_PRICE_DECIMALS} decimals: {text!r}")
    if not math.isfinite(value) or not low <= value <= high:
        raise ValueError(f"{text} is outside {low}..{high}")
    return value


def _parse_date(text: str) -> _dt.date:
    try:
        return _dt.datetime.strptime(text, "%d.%m.%Y").date()
    except ValueError:
        raise ValueError(f"not a date in dd.mm.yyyy form: {text!r}") from None


class LeagueShell(cmd.Cmd):
    """Command shell over a league and its result table."""

    prompt = "league> "

    def __init__(
        self,
        league: League | None = None,
        table: ResultTable | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.league = league if league is not None else League()
        self.table = table if table is not None else ResultTable()

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    @staticmethod
    def _args(line: str, count: int, usage: str) -> list[str]:
        parts = shlex.split(line)
        if len(parts) != count:
            raise ValueError(f"usage: {usage}")
        return parts

    def _show_result(self, rows: list[list[str]]) -> None:
        self.table.update(rows)
        self._print_table()

    def _print_table(self) -> None:
        if not len(self.table):
            self._say("(empty)")
            return
        for number, row in enumerate(self.table, start=1):
            self._say("\t".join((str(number), *row)))

    def onecmd(self, line: str) -> bool:
        try:
            return bool(super().onecmd(line))
        except (ValueError, LookupError, OSError) as exc:
            self._say(f"Error: {exc}")
            return False

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        self._say(f"Unknown command: {line}")
        return False

    def do_add_team(self, line: str) -> None:
        """add_team NAME CITY COACH_LAST COACH_FIRST COACH_MIDDLE RANKING"""
        name, city, last, first, middle, ranking = self._args(
            line, 6, "add_team NAME CITY COACH_LAST COACH_FIRST COACH_MIDDLE RANKING"
        )
        self.league.add_team(
            Team(
                name=name,
                city=city,
                coach_last_name=last,
                coach_first_name=first,
                coach_middle_name=middle,
                ranking=parse_int(ranking, 0, 100),
            )
        )
        self._say("Team added.")

    def do_add_player(self, line: str) -> None:
        """add_player TEAM LAST FIRST MIDDLE AGE POSITION NUMBER"""
        team, last, first, middle, age, position, number = self._args(
            line, 7, "add_player TEAM LAST FIRST MIDDLE AGE POSITION NUMBER"
        )
        player = Player(
            last_name=last,
            first_name=first,
            middle_name=middle,
            age=parse_int(age, 0, 100),
            position=position,
            number=parse_int(number, 0, 100),
        )
        self.league.add_player(team, player)
        self._say("Player added to the team.")

    def do_add_stadium(self, line: str) -> None:
        """add_stadium TEAM NAME CITY CAPACITY TICKET_PRICE"""
        team, name, city, capacity, price = self._args(
            line, 5, "add_stadium TEAM NAME CITY CAPACITY TICKET_PRICE"
        )
        stadium = Stadium(
            name=name,
            city=city,
            capacity=parse_int(capacity, 0, 100000),
            ticket_price=parse_float(price, 0, 100000),
        )
        self.league.add_stadium(team, stadium)
        self._say("Stadium added for the team.")

    def do_add_match(self, line: str) -> None:
        """add_match TEAM TEAM1 TEAM2 DD.MM.YYYY SCORE"""
        team, team1, team2, day, score = self._args(
            line, 5, "add_match TEAM TEAM1 TEAM2 DD.MM.YYYY SCORE"
        )
        self.league.add_match(team, Match(team1, team2, _parse_date(day), score))
        self._say("Match added for the team.")

    def do_query1(self, line: str) -> None:
        """query1 TEAM: dates, opponents and scores of the team's matches"""
        (team,) = self._args(line, 1, "query1 TEAM")
        self._show_result(self.league.team_matches(team))

    def do_query2(self, line: str) -> None:
        """query2 STADIUM DD.MM.YYYY: numbers and last names of players who played"""
        stadium, day = self._args(line, 2, "query2 STADIUM DD.MM.YYYY")
        self._show_result(self.league.players_on_date(stadium, _parse_date(day)))

    def do_query3(self, line: str) -> None:
        """query3: players who scored the most goals"""
        self._args(line, 0, "query3")
        self._show_result(self.league.top_scorers())

    def do_show(self, line: str) -> None:
        """show: print the result table"""
        self._args(line, 0, "show")
        self._print_table()

    def do_refresh(self, line: str) -> None:
        """refresh: clear the result table"""
        self._args(line, 0, "refresh")
        self.table.clear()
        self._say("Table refreshed.")

    def do_delete(self, line: str) -> None:
        """delete ROW: remove a row of the result table, counted from 1"""
        (text,) = self._args(line, 1, "delete ROW")
        try:
            number = int(text)
        except ValueError:
            raise ValueError(f"not a row number: {text!r}") from None
        self.table.delete_row(number - 1)
        self._say("Row deleted.")

    def do_save(self, line: str) -> None:
        """save PATH: write the result table to a text file"""
        (path,) = self._args(line, 1, "save PATH")
        self.table.save(path)
        self._say("Table saved to file.")

    def do_quit(self, line: str) -> bool:
        """quit: leave the shell"""
        return True

    def do_EOF(self, line: str) -> bool:
        return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="footleague",
        description="Keep football teams, players, stadiums and matches and query them.",
    )
    parser.parse_args(argv)
    shell = LeagueShell(stdin=sys.stdin, stdout=sys.stdout)
    shell.use_rawinput = sys.stdin.isatty()
    shell.cmdloop()
    return 0