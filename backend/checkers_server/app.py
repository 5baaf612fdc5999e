from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from checkers_core.errors import InvariantViolation

from .schemas import SelectRequest, TargetRequest
from .session import GameSession

log = logging.getLogger(__name__)


def create_app(hold_input_until_settled: bool = True) -> FastAPI:
    app = FastAPI(title="Checkers Rules Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession(hold_input_until_settled=hold_input_until_settled)
    app.state.session = session

    def get_session() -> GameSession:
        return session

    @app.exception_handler(InvariantViolation)
    async def invariant_violation_handler(request: Request, exc: InvariantViolation):
        log.error("Engine invariant violated on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/destinations")
    def read_destinations(
        row: int = Query(..., ge=0),
        col: int = Query(..., ge=0),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_destinations(row, col)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/select")
    def select_piece(payload: SelectRequest, session: GameSession = Depends(get_session)):
        try:
            return session.select(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/target")
    def choose_target(payload: TargetRequest, session: GameSession = Depends(get_session)):
        try:
            return session.choose_target(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/settled")
    def settled(session: GameSession = Depends(get_session)):
        return session.settle()

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app


app = create_app()
