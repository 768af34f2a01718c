"""Learner Sessions API

In-memory sessions over the pure state machine in engines.session. Each
request loads the session's SessionState, applies one transition and stores
the returned state. Nothing is persisted; sessions vanish with the process.
"""
import random
from typing import Literal
from uuid import uuid4

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, model_validator

from api.deps import get_language_module
from api.scenarios import ScenarioResponse, TokenResponse, scenario_view, token_view
from core.config import settings
from core.errors import AppError, Result, not_found, raise_error, raise_result
from core.logging import api_logger
from engines.inflection import Token, try_inflect
from engines.session import (
    ScoringRules,
    SessionState,
    advance,
    check_answer,
    clear_candidate,
    remove_token,
    select_token,
    start_session,
)
from languages import LanguageModule
from languages.old_english.words import Word

log = api_logger()

router = APIRouter()

_SESSIONS: dict[str, SessionState] = {}


# === Request/Response Models ===

class TokenRequest(BaseModel):
    """Either a plain word, or a noun with the case and number picked from its table."""
    word: str | None = None
    noun: str | None = None
    case: Literal["nominative", "accusative", "genitive", "dative"] | None = None
    number: Literal["singular", "dual", "plural"] | None = None

    @model_validator(mode="after")
    def _one_kind(self) -> "TokenRequest":
        if (self.word is None) == (self.noun is None):
            raise ValueError("Provide exactly one of 'word' or 'noun'")
        if self.noun is not None and (self.case is None or self.number is None):
            raise ValueError("'case' and 'number' are required with 'noun'")
        return self


class SessionResponse(BaseModel):
    id: str
    level: int
    totalLevels: int
    score: int
    status: str
    feedback: str
    candidate: list[TokenResponse]
    scenario: ScenarioResponse | None
    advanceDelayMs: int


# === Helpers ===

def _load(session_id: str) -> SessionState:
    state = _SESSIONS.get(session_id)
    if state is None:
        raise_error(not_found("Session", session_id, origin="api.sessions").error)
    return state


def _view(session_id: str, state: SessionState, module: LanguageModule) -> SessionResponse:
    scenarios = module.get_scenarios()
    scenario = state.current_scenario(scenarios)
    return SessionResponse(
        id=session_id,
        level=state.level,
        totalLevels=len(scenarios),
        score=state.score,
        status=state.status,
        feedback=state.feedback,
        candidate=[token_view(t) for t in state.candidate],
        scenario=scenario_view(
            scenario,
            module.get_glosses(),
            shuffle=settings.SHUFFLE_WORD_BANK,
            # Stable word order for a given session and level
            rng=random.Random(f"{session_id}:{state.level}"),
        ) if scenario else None,
        advanceDelayMs=settings.ADVANCE_DELAY_MS,
    )


def _apply(
    session_id: str, result: Result[SessionState, AppError], module: LanguageModule
) -> SessionResponse:
    raise_result(result)
    state = result.unwrap()
    _SESSIONS[session_id] = state
    return _view(session_id, state, module)


def _to_token(body: TokenRequest, module: LanguageModule) -> Token:
    if body.word is not None:
        return Word(body.word)
    declension = module.get_declension_registry().get(body.noun)
    result = try_inflect(declension, body.case, body.number)
    raise_result(result)
    return result.unwrap()


# === Endpoints ===

@router.post("/", response_model=SessionResponse, status_code=201)
async def create_session(module: LanguageModule = Depends(get_language_module)):
    """Start a new session at level 0 with a score of 0."""
    session_id = str(uuid4())
    state = start_session(module.get_scenarios())
    _SESSIONS[session_id] = state
    log.info("session_created", session_id=session_id, status=state.status)
    return _view(session_id, state, module)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, module: LanguageModule = Depends(get_language_module)):
    return _view(session_id, _load(session_id), module)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
    """Abandon a session."""
    _load(session_id)
    del _SESSIONS[session_id]
    log.info("session_deleted", session_id=session_id)
    return Response(status_code=204)


@router.post("/{session_id}/tokens", response_model=SessionResponse)
async def add_token(
    session_id: str,
    body: TokenRequest,
    module: LanguageModule = Depends(get_language_module),
):
    """Append a word or an inflected noun to the candidate sentence."""
    state = _load(session_id)
    return _apply(session_id, select_token(state, _to_token(body, module)), module)


@router.delete("/{session_id}/tokens/{index}", response_model=SessionResponse)
async def delete_token(
    session_id: str,
    index: int,
    module: LanguageModule = Depends(get_language_module),
):
    """Remove the candidate token at a position."""
    return _apply(session_id, remove_token(_load(session_id), index), module)


@router.post("/{session_id}/check", response_model=SessionResponse)
async def check_session_answer(session_id: str, module: LanguageModule = Depends(get_language_module)):
    """Check the candidate sentence against the current scenario."""
    state = _load(session_id)
    rules = ScoringRules.from_settings(settings)
    return _apply(session_id, check_answer(state, module.get_scenarios(), rules), module)


@router.post("/{session_id}/advance", response_model=SessionResponse)
async def advance_session(session_id: str, module: LanguageModule = Depends(get_language_module)):
    """Move on after a correct answer (called once the success feedback has been shown)."""
    return _apply(session_id, advance(_load(session_id), module.get_scenarios()), module)


@router.post("/{session_id}/retry", response_model=SessionResponse)
async def retry_session(session_id: str, module: LanguageModule = Depends(get_language_module)):
    """Clear the candidate sentence."""
    return _apply(session_id, clear_candidate(_load(session_id)), module)
