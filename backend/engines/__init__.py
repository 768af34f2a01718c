from engines.inflection import InflectedWord, Token, try_inflect
from engines.matcher import check, tokens_match, first_mismatch
from engines.scenarios import Scenario, ScenarioSet, build_scenarios
from engines.session import (
    SessionState,
    ScoringRules,
    start_session,
    select_token,
    remove_token,
    clear_candidate,
    check_answer,
    advance,
)

__all__ = [
    "InflectedWord",
    "Token",
    "try_inflect",
    "check",
    "tokens_match",
    "first_mismatch",
    "Scenario",
    "ScenarioSet",
    "build_scenarios",
    "SessionState",
    "ScoringRules",
    "start_session",
    "select_token",
    "remove_token",
    "clear_candidate",
    "check_answer",
    "advance",
]
