# footleague

footleague is a small in-memory register for a football league. You record
teams, then attach players, stadiums and matches to a team by its name. Three
queries run over the register. The latest query result is held in a table.
You can print that table, delete rows from it, clear it, or save it as a text
file.

## Installing

```
pip install .
```

## The shell

Start it with:

```
footleague
```

The prompt is `league> `. Each command takes all of its arguments on one line.
Arguments are split the way a shell splits them, so a value that contains
spaces must be put in quotes, for example `"Red Star"`. If the number of
arguments is wrong, the shell prints the usage. `help` lists the commands and
`help COMMAND` shows the usage of one.

| Command | Arguments |
| --- | --- |
| `add_team` | `NAME CITY COACH_LAST COACH_FIRST COACH_MIDDLE RANKING` |
| `add_player` | `TEAM LAST FIRST MIDDLE AGE POSITION NUMBER` |
| `add_stadium` | `TEAM NAME CITY CAPACITY TICKET_PRICE` |
| `add_match` | `TEAM TEAM1 TEAM2 DD.MM.YYYY SCORE` |
| `query1` | `TEAM` |
| `query2` | `STADIUM DD.MM.YYYY` |
| `query3` | none |
| `show` | none |
| `refresh` | none |
| `delete` | `ROW` (counted from 1) |
| `save` | `PATH` |
| `quit` | none (end of input also leaves the shell) |

The shell checks numeric fields against these ranges:

- ranking, age and shirt number: whole numbers from 0 to 100
- stadium capacity: a whole number from 0 to 100000
- ticket price: a number from 0 to 100000 with at most two decimals

Dates are written as `dd.mm.yyyy`. A player, stadium or match can only be
added to a team that already exists. Errors are printed as `Error: ...` and
the shell carries on.

### Queries

1. `query1 TEAM`: the date (`dd.MM.yyyy`), opponent (`TEAM2`) and score of
   every match recorded for the team.
2. `query2 STADIUM DATE`: the shirt number and last name of every player of
   each team that has a match recorded on that date. Matches do not record a
   stadium, so the stadium argument is required but does not narrow the
   result. A team with several matches on that date is listed once per match.
3. `query3`: the last name, first name and goal count of the players with the
   most goals. If nobody has scored, every player is listed.

Each query replaces the result table and prints it. Every printed row starts
with its row number, and the cells are separated by tabs. An empty table is
printed as `(empty)`. `save` writes each cell followed by a tab and ends each
row with a newline, without the row numbers.

### Example session

```
league> add_team Rovers Northtown Brown Tom Lee 5
Team added.
league> add_player Rovers Smith John Paul 24 forward 9
Player added to the team.
league> add_match Rovers Rovers United 01.05.2024 2:1
Match added for the team.
league> query1 Rovers
1	01.05.2024	United	2:1
league> save matches.txt
Table saved to file.
league> quit
```

## Library use

- `footleague.models` holds the dataclasses `Player`, `Stadium`, `Match` and
  `Team`.
- `footleague.league.League` keeps the teams. It provides `add_team`,
  `add_player`, `add_stadium`, `add_match`, `find_team`, `find_stadium` and the
  queries `team_matches`, `players_on_date` and `top_scorers`. The queries
  return rows as lists of strings. A method given the name of an unknown team
  raises `TeamNotFoundError`, which is a `LookupError`. `find_team` and
  `find_stadium` return `None` instead.
- `footleague.table.ResultTable` holds rows of text cells. The first row fixes
  the number of columns, and later rows are padded or cut to that width. It
  provides `update`, `clear`, `delete_row` (zero-based; raises `IndexError`
  when the index is out of range) and `save`.
- `footleague.cli` provides `LeagueShell`, the helpers `parse_int` and
  `parse_float`, and `main`.

```python
from datetime import date

from footleague.league import League, TeamNotFoundError
from footleague.models import Match, Player, Team
from footleague.table import ResultTable

league = League()
league.add_team(Team(name="Rovers", city="Northtown"))
league.add_player(
    "Rovers", Player(last_name="Smith", first_name="John", number=9, goals_scored=3)
)
league.add_match(
    "Rovers",
    Match(team1="Rovers", team2="United", date=date(2024, 5, 1), score="2:1"),
)

table = ResultTable()
table.update(league.team_matches("Rovers"))
table.save("matches.txt")

print(league.top_scorers())  # [['Smith', 'John', '3']]

try:
    league.add_player("Nobody", Player(last_name="Doe", first_name="Jane"))
except TeamNotFoundError:
    print("no such team")
```

## What it does not do

- The register lives only in memory. Teams, players, stadiums and matches are
  not saved anywhere and are lost when the shell exits. Only the result table
  can be written to a file, and it cannot be read back.
- The shell has no command to record goals. Players added there always have
  zero goals, so `query3` lists every player. Goal counts can be set only
  through the library, with `Player.goals_scored`.
- There is no graphical window. The package offers the command shell and the
  library only.

## Running the tests

```
pip install .[test]
pytest
```