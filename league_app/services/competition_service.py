import logging
from dataclasses import dataclass, field
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from league_app.errors import CompetitionNotFound, ConcurrentUpdateError
from league_app.models.competition import Competition
from league_app.models.league import Match, Team, dump, load_matches, load_teams
from league_app.services.match_service import merge_matches, split_matches
from league_app.services.ranking_service import compute_standings

logger = logging.getLogger(__name__)


@dataclass
class Aggregate:
    teams: list[Team] = field(default_factory=list)
    fixtures: list[Match] = field(default_factory=list)
    results: list[Match] = field(default_factory=list)

    def matches(self) -> list[Match]:
        return merge_matches(self.results, self.fixtures)


def get_all(db: Session):
    return db.query(Competition).order_by(Competition.name).all()

def get_by_id(db: Session, competition_id: str):
    return db.query(Competition).filter(Competition.id == competition_id).first()

def get_or_raise(db: Session, competition_id):
    competition = get_by_id(db, competition_id)
    if competition is None:
        raise CompetitionNotFound(competition_id)
    return competition

def create(db: Session, name: str, teams=None, fixtures=None, results=None):
    c = Competition(name=name, teams=[], fixtures=[], results=[], standings=[])
    db.add(c)
    write_aggregate(c, Aggregate(
        teams=load_teams(teams),
        fixtures=load_matches(fixtures),
        results=load_matches(results),
    ))
    commit(db, c)
    return c


def read_aggregate(competition):
    return Aggregate(
        teams=load_teams(competition.teams),
        fixtures=load_matches(competition.fixtures),
        results=load_matches(competition.results),
    )


def read_standings(competition):
    return load_teams(competition.standings)


def write_aggregate(competition: Competition, aggregate: Aggregate):
    """Recompute the table and store the whole aggregate on ``competition``.

    Matches are re-sorted into results and fixtures first, so a match that
    changed status moves to the right list. Nothing is committed here.
    """
    results, fixtures = split_matches(aggregate.matches())
    standings = compute_standings(aggregate.teams, results, fixtures)

    # new list objects so the JSON columns are flagged dirty
    competition.teams = dump(aggregate.teams)
    competition.fixtures = dump(fixtures)
    competition.results = dump(results)
    competition.standings = dump(standings)


def commit(db: Session, competition):
    try:
        db.commit()
    except StaleDataError as e:
        db.rollback()
        logger.warning("competition %s changed during recompute", competition.id)
        raise ConcurrentUpdateError(competition.id) from e
    db.refresh(competition)


def update(db: Session, competition_id, change):
    competition = get_or_raise(db, competition_id)
    aggregate = change(read_aggregate(competition))
    write_aggregate(competition, aggregate)
    commit(db, competition)
    logger.info("recomputed standings for %s (version %s)", competition.name, competition.version)
    return competition


def recalculate(db: Session, competition_id):
    return update(db, competition_id, lambda aggregate: aggregate)


def update_status(db: Session, competition_id, status):
    competition = get_or_raise(db, competition_id)
    competition.status = status
    commit(db, competition)
    return competition
