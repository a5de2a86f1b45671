from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from league_app.database import get_db
from league_app.schemas.competition import CompetitionCreateRequest, CompetitionStatusRequest
from league_app.services import competition_service
from league_app.services.audit_service import audit
from league_app.services.export_service import standings_pdf
from league_app.services.scorer_service import top_scorers

router = APIRouter(prefix="/competitions")


def _competition_or_404(db: Session, competition_id: str):
    competition = competition_service.get_by_id(db, competition_id)
    if not competition:
        raise HTTPException(404, "Competition not found")
    return competition


def _table(competition):
    rows = []
    for position, team in enumerate(competition_service.read_standings(competition), start=1):
        rows.append({"position": position, "id": team.id, "name": team.name, **team.stats.to_document()})
    return rows


@router.get("/")
def list_competitions(db: Session = Depends(get_db), search: str = Query(None)):
    competitions_data = []
    for c in competition_service.get_all(db):
        if search and search.lower() not in c.name.lower():
            continue
        competitions_data.append({
            "id": c.id,
            "name": c.name,
            "status": c.status,
            "total_teams": len(c.teams or []),
            "total_matches": len(c.fixtures or []) + len(c.results or []),
            "version": c.version,
        })
    return competitions_data


@router.post("/", status_code=201)
def create_competition(body: CompetitionCreateRequest, db: Session = Depends(get_db)):
    c = competition_service.create(db, body.name, body.teams, body.fixtures, body.results)
    return {"id": c.id, "name": c.name, "version": c.version}


@router.get("/{competition_id}")
def get_competition(competition_id: str, db: Session = Depends(get_db)):
    c = _competition_or_404(db, competition_id)
    return {
        "id": c.id,
        "name": c.name,
        "status": c.status,
        "version": c.version,
        "teams": c.teams,
        "fixtures": c.fixtures,
        "results": c.results,
        "standings": c.standings,
    }


@router.post("/{competition_id}/status")
def update_status(competition_id: str, body: CompetitionStatusRequest, db: Session = Depends(get_db)):
    c = competition_service.update_status(db, competition_id, body.status)
    return {"id": c.id, "status": c.status}


@router.get("/{competition_id}/standings")
def competition_standings(competition_id: str, db: Session = Depends(get_db)):
    return _table(_competition_or_404(db, competition_id))


@router.post("/{competition_id}/recalculate")
def recalculate(competition_id: str, db: Session = Depends(get_db)):
    # also moves finished matches into results and everything else into fixtures
    c = competition_service.recalculate(db, competition_id)
    return {
        "version": c.version,
        "results": len(c.results),
        "fixtures": len(c.fixtures),
        "standings": _table(c),
    }


@router.get("/{competition_id}/top-scorers")
def competition_top_scorers(competition_id: str, db: Session = Depends(get_db), limit: int = Query(None, ge=1)):
    c = _competition_or_404(db, competition_id)
    aggregate = competition_service.read_aggregate(c)
    scorers = top_scorers(aggregate.teams, aggregate.fixtures, aggregate.results)
    if limit:
        scorers = scorers[:limit]
    return [s.to_document() for s in scorers]


@router.get("/{competition_id}/audit")
def competition_audit(competition_id: str, db: Session = Depends(get_db)):
    c = _competition_or_404(db, competition_id)
    aggregate = competition_service.read_aggregate(c)
    return audit(aggregate.teams, aggregate.matches()).to_document()


@router.get("/{competition_id}/standings.pdf")
def competition_standings_pdf(competition_id: str, db: Session = Depends(get_db)):
    c = _competition_or_404(db, competition_id)
    buffer = standings_pdf(c.name, competition_service.read_standings(c))
    return StreamingResponse(
        buffer,
        media_type="application/pdf",
        headers={
            "Content-Disposition":
                f"attachment; filename=standings_{c.id}.pdf"
        }
    )
