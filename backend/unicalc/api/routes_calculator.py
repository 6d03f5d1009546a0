"""Calculator endpoints: one engine per session, driven one token at a time."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from unicalc.core.engine.keypad import KeypadError, dispatch, read_button, tokenize_keys
from unicalc.core.engine.sessions import CalculatorSessions, SessionNotFoundError
from unicalc.core.engine.calculator import CalculatorEngine
from unicalc.models.schemas import (
    CalculatorStateResponse,
    DisplayResponse,
    KeysRequest,
    KeysResponse,
    PressRequest,
    SessionResponse,
)

router = APIRouter(tags=["calculator"])
logger = logging.getLogger(__name__)


def get_sessions(request: Request) -> CalculatorSessions:
    return request.app.state.sessions


def _engine(sessions: CalculatorSessions, session_id: str) -> CalculatorEngine:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(404, detail=str(exc))


@router.post("/calculator/sessions", response_model=SessionResponse, status_code=201)
async def create_session(sessions: CalculatorSessions = Depends(get_sessions)):
    """Start a fresh calculator showing 0."""
    session_id, engine = sessions.create()
    logger.info("Calculator session %s started (%d active)", session_id, len(sessions))
    return {"session_id": session_id, "display": engine.display}


@router.get("/calculator/sessions/{session_id}", response_model=CalculatorStateResponse)
async def session_state(session_id: str, sessions: CalculatorSessions = Depends(get_sessions)):
    state = _engine(sessions, session_id).state
    return {
        "session_id": session_id,
        "current_entry": state.current_entry,
        "pending_operand": state.pending_operand,
        "pending_operator": state.pending_operator.value if state.pending_operator else None,
        "awaiting_new_entry": state.awaiting_new_entry,
    }


@router.post("/calculator/sessions/{session_id}/press", response_model=DisplayResponse)
async def press_button(
    session_id: str,
    req: PressRequest,
    sessions: CalculatorSessions = Depends(get_sessions),
):
    """Apply one button press and return the new display."""
    engine = _engine(sessions, session_id)
    try:
        token = read_button(value=req.value, action=req.action)
    except KeypadError as e:
        raise HTTPException(422, detail=[{"message": str(e), "key": e.key}])
    return {"display": dispatch(engine, token)}


@router.post("/calculator/sessions/{session_id}/keys", response_model=KeysResponse)
async def press_keys(
    session_id: str,
    req: KeysRequest,
    sessions: CalculatorSessions = Depends(get_sessions),
):
    """Apply a run of keyboard keys in order. Keys the calculator does not use are skipped."""
    engine = _engine(sessions, session_id)
    tokens = tokenize_keys(req.keys)
    for tok in tokens:
        dispatch(engine, tok)
    return {"display": engine.display, "ignored": len(req.keys) - len(tokens)}


@router.delete("/calculator/sessions/{session_id}", status_code=204)
async def end_session(session_id: str, sessions: CalculatorSessions = Depends(get_sessions)):
    try:
        sessions.discard(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(404, detail=str(exc))
    return Response(status_code=204)
