from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Optional


class Position(str, Enum):
    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"


class PlayerOrigin(str, Enum):
    """Registered players come from admin tooling, synthesized ones from event data."""

    REGISTERED = "registered"
    SYNTHESIZED = "synthesized"


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"
    ABANDONED = "abandoned"
    SUSPENDED = "suspended"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


DECIDED_STATUSES = (MatchStatus.FINISHED, MatchStatus.ABANDONED)


def _int(value, default: Optional[int] = 0) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str(value) -> str:
    return "" if value is None else str(value)


def _enum(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


@dataclass
class PlayerStats:
    appearances: int = 0
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    clean_sheets: int = 0
    potm_wins: int = 0

    @classmethod
    def from_document(cls, doc: Optional[dict]) -> "PlayerStats":
        doc = doc or {}
        return cls(
            appearances=_int(doc.get("appearances")),
            goals=_int(doc.get("goals")),
            assists=_int(doc.get("assists")),
            yellow_cards=_int(doc.get("yellowCards")),
            red_cards=_int(doc.get("redCards")),
            clean_sheets=_int(doc.get("cleanSheets")),
            potm_wins=_int(doc.get("potmWins")),
        )

    def to_document(self) -> dict:
        return {
            "appearances": self.appearances,
            "goals": self.goals,
            "assists": self.assists,
            "yellowCards": self.yellow_cards,
            "redCards": self.red_cards,
            "cleanSheets": self.clean_sheets,
            "potmWins": self.potm_wins,
        }

    def __add__(self, other: "PlayerStats") -> "PlayerStats":
        return PlayerStats(**{
            f.name: getattr(self, f.name) + getattr(other, f.name)
            for f in fields(self)
        })


@dataclass
class Player:
    id: Optional[int]
    name: str
    position: Position = Position.MIDFIELDER
    number: int = 0
    stats: PlayerStats = field(default_factory=PlayerStats)
    origin: PlayerOrigin = PlayerOrigin.REGISTERED

    @classmethod
    def from_document(cls, doc: dict) -> "Player":
        return cls(
            id=_int(doc.get("id"), None),
            name=_str(doc.get("name")),
            position=_enum(Position, doc.get("position"), Position.MIDFIELDER),
            number=_int(doc.get("number")),
            stats=PlayerStats.from_document(doc.get("stats")),
            origin=_enum(PlayerOrigin, doc.get("origin"), PlayerOrigin.REGISTERED),
        )

    def to_document(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.value,
            "number": self.number,
            "stats": self.stats.to_document(),
            "origin": self.origin.value,
        }


@dataclass
class TableRow:
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_scored: int = 0
    goals_conceded: int = 0
    goal_difference: int = 0
    points: int = 0
    form: str = ""
    away_wins: int = 0

    @classmethod
    def from_document(cls, doc: Optional[dict]) -> "TableRow":
        doc = doc or {}
        return cls(
            played=_int(doc.get("played")),
            won=_int(doc.get("won")),
            drawn=_int(doc.get("drawn")),
            lost=_int(doc.get("lost")),
            goals_scored=_int(doc.get("goalsScored")),
            goals_conceded=_int(doc.get("goalsConceded")),
            goal_difference=_int(doc.get("goalDifference")),
            points=_int(doc.get("points")),
            form=_str(doc.get("form")),
            away_wins=_int(doc.get("awayWins")),
        )

    def to_document(self) -> dict:
        return {
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goalsScored": self.goals_scored,
            "goalsConceded": self.goals_conceded,
            "goalDifference": self.goal_difference,
            "points": self.points,
            "form": self.form,
            "awayWins": self.away_wins,
        }


@dataclass
class Team:
    id: Any
    name: str
    players: list[Player] = field(default_factory=list)
    stats: TableRow = field(default_factory=TableRow)

    @classmethod
    def from_document(cls, doc: dict) -> "Team":
        return cls(
            id=doc.get("id"),
            name=_str(doc.get("name")),
            players=[Player.from_document(p) for p in doc.get("players") or []],
            stats=TableRow.from_document(doc.get("stats")),
        )

    def to_document(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "players": [p.to_document() for p in self.players],
            "stats": self.stats.to_document(),
        }


@dataclass
class MatchEvent:
    type: str
    player_name: str = ""
    team_name: str = ""
    player_id: Optional[int] = None
    minute: Optional[int] = None
    description: Optional[str] = None

    @classmethod
    def from_document(cls, doc: dict) -> "MatchEvent":
        return cls(
            type=_str(doc.get("type")),
            player_name=_str(doc.get("playerName")),
            team_name=_str(doc.get("teamName")),
            player_id=_int(doc.get("playerId", doc.get("playerID")), None),
            minute=_int(doc.get("minute"), None),
            description=doc.get("description"),
        )

    def to_document(self) -> dict:
        return {
            "type": self.type,
            "playerName": self.player_name,
            "teamName": self.team_name,
            "playerId": self.player_id,
            "minute": self.minute,
            "description": self.description,
        }


@dataclass
class Lineup:
    starters: list[int] = field(default_factory=list)
    subs: list[int] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Optional[dict]) -> Optional["Lineup"]:
        if doc is None:
            return None
        return cls(
            starters=[i for i in (_int(v, None) for v in doc.get("starters") or []) if i is not None],
            subs=[i for i in (_int(v, None) for v in doc.get("subs") or []) if i is not None],
        )

    def to_document(self) -> dict:
        return {"starters": list(self.starters), "subs": list(self.subs)}

    def player_ids(self) -> list[int]:
        """Distinct ids across starters and subs, in listed order."""
        return list(dict.fromkeys(self.starters + self.subs))


@dataclass
class PlayerOfTheMatch:
    name: str
    team_name: str
    player_id: Optional[int] = None

    @classmethod
    def from_document(cls, doc: Optional[dict]) -> Optional["PlayerOfTheMatch"]:
        if not doc:
            return None
        return cls(
            name=_str(doc.get("name")),
            team_name=_str(doc.get("teamName")),
            player_id=_int(doc.get("playerId", doc.get("playerID")), None),
        )

    def to_document(self) -> dict:
        return {"name": self.name, "teamName": self.team_name, "playerId": self.player_id}


@dataclass
class Match:
    id: Any
    team_a: str
    team_b: str
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    status: MatchStatus = MatchStatus.SCHEDULED
    date: Optional[str] = None
    full_date: Optional[str] = None  # ISO 8601; `date` may be a display string
    events: list[MatchEvent] = field(default_factory=list)
    lineup_a: Optional[Lineup] = None
    lineup_b: Optional[Lineup] = None
    player_of_the_match: Optional[PlayerOfTheMatch] = None
    matchday: Optional[int] = None
    venue: Optional[str] = None

    @property
    def is_decided(self) -> bool:
        return (
            self.status in DECIDED_STATUSES
            and self.score_a is not None
            and self.score_b is not None
        )

    @classmethod
    def from_document(cls, doc: dict) -> "Match":
        lineups = doc.get("lineups") or {}
        return cls(
            id=doc.get("id"),
            team_a=_str(doc.get("teamA")),
            team_b=_str(doc.get("teamB")),
            score_a=_int(doc.get("scoreA"), None),
            score_b=_int(doc.get("scoreB"), None),
            status=_enum(MatchStatus, doc.get("status"), MatchStatus.SCHEDULED),
            date=doc.get("date"),
            full_date=doc.get("fullDate"),
            events=[MatchEvent.from_document(e) for e in doc.get("events") or []],
            lineup_a=Lineup.from_document(lineups.get("teamA")),
            lineup_b=Lineup.from_document(lineups.get("teamB")),
            player_of_the_match=PlayerOfTheMatch.from_document(doc.get("playerOfTheMatch")),
            matchday=_int(doc.get("matchday"), None),
            venue=doc.get("venue"),
        )

    def to_document(self) -> dict:
        lineups = {}
        if self.lineup_a is not None:
            lineups["teamA"] = self.lineup_a.to_document()
        if self.lineup_b is not None:
            lineups["teamB"] = self.lineup_b.to_document()
        return {
            "id": self.id,
            "teamA": self.team_a,
            "teamB": self.team_b,
            "scoreA": self.score_a,
            "scoreB": self.score_b,
            "status": self.status.value,
            "date": self.date,
            "fullDate": self.full_date,
            "events": [e.to_document() for e in self.events],
            "lineups": lineups or None,
            "playerOfTheMatch": (
                self.player_of_the_match.to_document() if self.player_of_the_match else None
            ),
            "matchday": self.matchday,
            "venue": self.venue,
        }


@dataclass
class ScorerRecord:
    name: str
    team: str
    goals: int
    potm_wins: int
    composite_score: int
    player_id: Optional[int] = None

    def to_document(self) -> dict:
        return {
            "name": self.name,
            "team": self.team,
            "goals": self.goals,
            "potmWins": self.potm_wins,
            "compositeScore": self.composite_score,
            "playerId": self.player_id,
        }


def strip_undefined(obj):
    """Recursively drop None-valued keys and list items.

    The document store accepts a missing key but not an unset value, so every
    document goes through this before it is written.
    """
    if isinstance(obj, dict):
        return {k: strip_undefined(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple)):
        return [strip_undefined(v) for v in obj if v is not None]
    return obj


def load_teams(docs) -> list[Team]:
    return [Team.from_document(d) for d in docs or []]


def load_matches(docs) -> list[Match]:
    return [Match.from_document(d) for d in docs or []]


def dump(items) -> list[dict]:
    return [strip_undefined(i.to_document()) for i in items]
