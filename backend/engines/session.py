"""Learner Session State Machine

A session moves through three statuses:

    playing --check_answer(correct)--> advancing --advance--> playing (next level)
                                                  \\--------> completed (no levels left)

Every transition is a pure function from SessionState to
Result[SessionState, AppError]. Nothing here raises for a user action and
nothing owns a timer: the presentation shows the success feedback for
ADVANCE_DELAY_MS and then calls advance().
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal

from core.errors import (
    AppError,
    Ok,
    Result,
    ensure,
    not_found,
    out_of_range,
    require,
    state_conflict,
)
from core.logging import session_logger
from .inflection import Token
from .matcher import check, first_mismatch
from .scenarios import Scenario, ScenarioSet

if TYPE_CHECKING:
    from core.config import Settings

log = session_logger()

SessionStatus = Literal["playing", "advancing", "completed"]

SUCCESS_FEEDBACK = "Correct! The case endings match the sentence meaning."
RETRY_FEEDBACK = "Try again! Check the case endings carefully."
COMPLETED_FEEDBACK = "Congratulations! You've completed all scenarios with a score of {score}."


@dataclass(frozen=True, slots=True)
class ScoringRules:
    """Points awarded for a correct answer and deducted for a wrong one."""
    correct_points: int = 10
    wrong_penalty: int = 5

    @classmethod
    def from_settings(cls, settings: Settings) -> ScoringRules:
        return cls(
            correct_points=settings.CORRECT_ANSWER_POINTS,
            wrong_penalty=settings.WRONG_ANSWER_PENALTY,
        )


@dataclass(frozen=True, slots=True)
class SessionState:
    level: int = 0
    score: int = 0
    candidate: tuple[Token, ...] = ()
    feedback: str = ""
    status: SessionStatus = "playing"

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    def current_scenario(self, scenarios: ScenarioSet) -> Scenario | None:
        """Scenario being played, None once the session is completed."""
        if self.is_completed:
            return None
        return scenarios.at_level(self.level)


def _require_status(
    state: SessionState, required: SessionStatus, action: str
) -> Result[None, AppError]:
    result = ensure(
        state.status == required,
        state_conflict("Session", state.status, required, origin=f"session.{action}").error,
    )
    if result.is_err():
        log.info("transition_rejected", action=action, status=state.status, level=state.level)
    return result


def start_session(scenarios: ScenarioSet) -> SessionState:
    """Fresh session at level 0. Completed straight away when there is nothing to play."""
    if len(scenarios) == 0:
        return SessionState(status="completed", feedback=COMPLETED_FEEDBACK.format(score=0))
    return SessionState()


def select_token(state: SessionState, token: Token) -> Result[SessionState, AppError]:
    """Append a token to the candidate sentence."""
    return _require_status(state, "playing", "select_token").map(
        lambda _: replace(state, candidate=(*state.candidate, token))
    )


def remove_token(state: SessionState, index: int) -> Result[SessionState, AppError]:
    """Remove the candidate token at a position."""
    def _remove(_) -> Result[SessionState, AppError]:
        if not 0 <= index < len(state.candidate):
            return out_of_range(
                "index", index, min_val=0, max_val=len(state.candidate) - 1,
                origin="session.remove_token",
            )
        return Ok(replace(state, candidate=state.candidate[:index] + state.candidate[index + 1:]))

    return _require_status(state, "playing", "remove_token").and_then(_remove)


def clear_candidate(state: SessionState) -> Result[SessionState, AppError]:
    """Start the current sentence over."""
    return _require_status(state, "playing", "clear_candidate").map(
        lambda _: replace(state, candidate=(), feedback="")
    )


def check_answer(
    state: SessionState,
    scenarios: ScenarioSet,
    rules: ScoringRules = ScoringRules(),
) -> Result[SessionState, AppError]:
    """Score the candidate against the current scenario.

    Correct: award points, clear the candidate and wait for advance().
    Wrong: deduct points (never below zero) and keep the candidate for editing.
    """
    def _check(scenario: Scenario) -> SessionState:
        if check(state.candidate, scenario.correct_pattern):
            log.info("answer_correct", level=state.level, scenario_id=scenario.id)
            return replace(
                state,
                score=state.score + rules.correct_points,
                candidate=(),
                feedback=SUCCESS_FEEDBACK,
                status="advancing",
            )
        log.info(
            "answer_incorrect",
            level=state.level,
            scenario_id=scenario.id,
            mismatch_at=first_mismatch(state.candidate, scenario.correct_pattern),
            candidate=state.candidate,
        )
        return replace(
            state,
            score=max(0, state.score - rules.wrong_penalty),
            feedback=RETRY_FEEDBACK,
        )

    return (
        _require_status(state, "playing", "check_answer")
        .and_then(lambda _: require(
            scenarios.at_level(state.level),
            not_found("Scenario at level", state.level, origin="session.check_answer").error,
        ))
        .map(_check)
    )


def advance(state: SessionState, scenarios: ScenarioSet) -> Result[SessionState, AppError]:
    """Move past a correctly answered scenario."""
    def _advance(_) -> SessionState:
        level = state.level + 1
        if level >= len(scenarios):
            log.info("session_completed", score=state.score, levels=len(scenarios))
            return replace(
                state,
                level=level,
                candidate=(),
                feedback=COMPLETED_FEEDBACK.format(score=state.score),
                status="completed",
            )
        log.debug("level_advanced", level=level)
        return replace(state, level=level, candidate=(), feedback="", status="playing")

    return _require_status(state, "advancing", "advance").map(_advance)
