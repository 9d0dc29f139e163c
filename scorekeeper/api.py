"""
REST API for the scoring engine.
Thin wrappers around the catalog, evaluator and completion workflow.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from scorekeeper.catalog import FormatCatalog, normalize_sport_name
from scorekeeper.config import load_configured_catalog
from scorekeeper.evaluation import evaluate, set_winner
from scorekeeper.services import (
    GameNotCompletableError,
    InvalidScoreError,
    UnknownFormatError,
    build_completion_record,
    can_complete,
    final_game_result,
    needs_overtime,
    parse_unit_scores,
    resolve_format,
    sets_to_show,
)

logger = logging.getLogger(__name__)


# ---------- Lifespan: build the catalog once ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app.state.catalog = load_configured_catalog()
    logger.info("Scoring catalog ready (%d sports)", len(app.state.catalog))
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="Scorekeeper API",
    description="Scoring formats and match results for set- and period-based sports",
    version="0.1.0",
    lifespan=lifespan,
)


def get_catalog(request: Request) -> FormatCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = load_configured_catalog()
        request.app.state.catalog = catalog
    return catalog


# ---------- Request/Response models ----------


class SetStatusRequest(BaseModel):
    our_score: int = Field(..., ge=0)
    their_score: int = Field(..., ge=0)
    target_score: int = Field(..., ge=1)
    cap: int | None = Field(default=None, ge=1)
    win_by_two_required: bool = True


class GameScoresRequest(BaseModel):
    sport: str | None = None
    format_id: str | None = None
    scores: list[dict[str, Any]] = Field(default_factory=list)


class CompleteGameRequest(GameScoresRequest):
    mark_complete: bool = False


def _parse_game(catalog: FormatCatalog, req: GameScoresRequest):
    try:
        profile, fmt = resolve_format(catalog, req.sport, req.format_id)
    except UnknownFormatError as e:
        raise HTTPException(status_code=404, detail=str(e))
    try:
        scores = parse_unit_scores(req.scores)
    except InvalidScoreError as e:
        logger.info("Rejected scores for %s/%s: %s", profile.sport_id, fmt.id, e)
        raise HTTPException(status_code=400, detail=str(e))
    return profile, fmt, scores


# ---------- Sports ----------


@app.get("/sports")
def list_sports(catalog: FormatCatalog = Depends(get_catalog)) -> dict[str, Any]:
    return {
        "default_sport": catalog.default_profile.sport_id,
        "sports": [p.to_dict() for p in catalog.sports()],
    }


@app.get("/sports/{sport_name}")
def get_sport(sport_name: str, catalog: FormatCatalog = Depends(get_catalog)) -> dict[str, Any]:
    """Resolved profile; fallback is true when the default sport was substituted."""
    profile = catalog.resolve_profile(sport_name)
    return {
        "requested": sport_name,
        "fallback": profile.sport_id != normalize_sport_name(sport_name),
        "profile": profile.to_dict(),
    }


# ---------- Sets ----------


@app.post("/sets/status")
def set_status(req: SetStatusRequest) -> dict[str, Any]:
    if req.cap is not None and req.cap < req.target_score:
        raise HTTPException(status_code=400, detail="cap must be at least target_score")
    winner = set_winner(req.our_score, req.their_score, req.target_score, req.cap, req.win_by_two_required)
    return {
        "complete": winner is not None,
        "winner": winner.value if winner is not None else None,
    }


# ---------- Games ----------


@app.post("/games/evaluate")
def evaluate_game(req: GameScoresRequest, catalog: FormatCatalog = Depends(get_catalog)) -> dict[str, Any]:
    profile, fmt, scores = _parse_game(catalog, req)
    result = evaluate(scores, fmt)
    return {
        "sport": profile.sport_id,
        "format": fmt.to_dict(),
        "result": result.to_dict(),
        "display_result": final_game_result(result).value,
        "can_complete": can_complete(result, fmt),
        "needs_overtime": needs_overtime(result, fmt),
        "sets_to_show": sets_to_show(scores, fmt),
    }


@app.post("/games/complete")
def complete_game(req: CompleteGameRequest, catalog: FormatCatalog = Depends(get_catalog)) -> dict[str, Any]:
    profile, fmt, scores = _parse_game(catalog, req)
    try:
        record = build_completion_record(fmt, scores, mark_complete=req.mark_complete)
    except GameNotCompletableError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"sport": profile.sport_id, "record": record}
