import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from league_app.config import LOG_LEVEL
from league_app.database import engine, Base
from league_app.errors import (
    CompetitionNotFound,
    ConcurrentUpdateError,
    MatchNotFound,
    MergeError,
    TeamNotFound,
)
from league_app.routers import (
    competition_router,
    team_router,
    match_router
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="League standings")

app.include_router(competition_router.router)
app.include_router(team_router.router)
app.include_router(match_router.router)


@app.exception_handler(CompetitionNotFound)
def _competition_not_found(request: Request, exc: CompetitionNotFound):
    return JSONResponse(status_code=404, content={"detail": "Competition not found"})


@app.exception_handler(TeamNotFound)
def _team_not_found(request: Request, exc: TeamNotFound):
    return JSONResponse(status_code=404, content={"detail": "Team not found"})


@app.exception_handler(MatchNotFound)
def _match_not_found(request: Request, exc: MatchNotFound):
    return JSONResponse(status_code=404, content={"detail": "Match not found"})


@app.exception_handler(MergeError)
def _merge_error(request: Request, exc: MergeError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ConcurrentUpdateError)
def _concurrent_update(request: Request, exc: ConcurrentUpdateError):
    logger.warning("rejected write to competition %s: concurrent update", exc)
    return JSONResponse(
        status_code=409,
        content={"detail": "Competition was modified by another request; reload and retry"},
    )
