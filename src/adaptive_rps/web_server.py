"""
HTTP front end for browser play.

Run with: uvicorn adaptive_rps.web_server:app
"""
import uuid
from typing import Dict, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request, Response
from loguru import logger
from pydantic import BaseModel

from adaptive_rps.config import GameConfig, load_config
from adaptive_rps.difficulty import DifficultyTier, InvalidDifficultyError, parse_tier
from adaptive_rps.game_logic import InvalidMoveError, parse_move
from adaptive_rps.match import Match, MatchOverError
from adaptive_rps.opponent import AdaptiveOpponent


# ---------------- Session storage ----------------
class SessionState:
    def __init__(self, cfg: GameConfig):
        self.opponent = AdaptiveOpponent.from_config(cfg.ai)
        self.match = Match(self.opponent, cfg.match.total_rounds)


_sessions: Dict[str, SessionState] = {}
_SID_COOKIE = "sid"


def _get_or_create_session(req: Request, resp: Response) -> Tuple[str, SessionState]:
    sid = req.cookies.get(_SID_COOKIE)
    if not sid or sid not in _sessions:
        sid = uuid.uuid4().hex
        _sessions[sid] = SessionState(cfg)
        resp.set_cookie(_SID_COOKIE, sid, httponly=False, samesite="lax")
        logger.info(f"New session {sid[:8]}")
    return sid, _sessions[sid]


# ---------------- Request/Response models ----------------
class RoundRequest(BaseModel):
    move: str
    difficulty: Optional[str] = None


class RoundResponse(BaseModel):
    round: int
    player: str
    ai: str
    result: str
    proof: str
    salt: str
    difficulty: str
    wins: int
    losses: int
    ties: int
    match_over: bool
    winner: Optional[str] = None


class DifficultyRequest(BaseModel):
    difficulty: str


class MatchState(BaseModel):
    difficulty: str
    total_rounds: int
    rounds_played: int
    wins: int
    losses: int
    ties: int
    match_over: bool
    winner: Optional[str] = None


def _state(sess: SessionState) -> MatchState:
    m = sess.match
    return MatchState(
        difficulty=sess.opponent.get_difficulty().value,
        total_rounds=m.total_rounds,
        rounds_played=m.rounds_played,
        wins=m.wins,
        losses=m.losses,
        ties=m.ties,
        match_over=m.is_over,
        winner=m.winner,
    )


# ---------------- App init ----------------
cfg = load_config()
app = FastAPI(title="Adaptive RPS")


@app.get("/api/config")
def api_config():
    return {
        "difficulties": [t.value for t in DifficultyTier],
        "default_difficulty": cfg.ai.default_difficulty,
        "total_rounds": cfg.match.total_rounds,
        "pattern_length": cfg.ai.pattern_length,
    }


@app.post("/api/round", response_model=RoundResponse)
def api_round(req: Request, resp: Response, rr: RoundRequest):
    _sid, sess = _get_or_create_session(req, resp)

    # validate everything before touching the session
    try:
        tier = parse_tier(rr.difficulty) if rr.difficulty is not None else None
        parse_move(rr.move)
        if sess.match.is_over:
            raise MatchOverError("Match is over; reset to start a new one")
        if tier is not None:
            sess.opponent.set_difficulty(tier)
        result = sess.match.play_round(rr.move)
    except (InvalidMoveError, InvalidDifficultyError, MatchOverError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    m = sess.match
    return RoundResponse(
        round=result.round,
        player=result.player.value,
        ai=result.ai.value,
        result=result.result,
        proof=result.proof,
        salt=result.salt,
        difficulty=sess.opponent.get_difficulty().value,
        wins=m.wins,
        losses=m.losses,
        ties=m.ties,
        match_over=m.is_over,
        winner=m.winner,
    )


@app.post("/api/difficulty", response_model=MatchState)
def api_difficulty(req: Request, resp: Response, dr: DifficultyRequest):
    _sid, sess = _get_or_create_session(req, resp)
    try:
        sess.opponent.set_difficulty(dr.difficulty)
    except InvalidDifficultyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _state(sess)


@app.post("/api/reset", response_model=MatchState)
def api_reset(req: Request, resp: Response):
    _sid, sess = _get_or_create_session(req, resp)
    sess.match.reset()
    return _state(sess)


# Simple health check
@app.get("/health")
def health():
    return {"ok": True}
