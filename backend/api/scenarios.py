"""Scenarios API Routes

Serves the teaching scenarios. A scenario view never reveals the target
cases: it offers the plain words (shuffled) and the full tables of the
nouns the learner has to decline.
"""
import random
from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.declensions import DeclensionResponse, declension_view
from api.deps import get_language_module
from core.config import settings
from engines.inflection import InflectedWord, Token
from engines.scenarios import Scenario
from languages import LanguageModule
from languages.old_english.words import Word

router = APIRouter()


# === Response Models ===

class TokenResponse(BaseModel):
    kind: Literal["plain", "inflected"]
    value: str
    base: str | None = None
    case: str | None = None
    number: str | None = None
    label: str | None = None


class ScenarioSummaryResponse(BaseModel):
    id: int
    level: int
    modernTranslation: str
    hint: str
    length: int


class ScenarioResponse(BaseModel):
    id: int
    modernTranslation: str
    hint: str
    wordBank: list[str]
    nouns: list[DeclensionResponse]


def token_view(token: Token) -> TokenResponse:
    match token:
        case InflectedWord():
            return TokenResponse(
                kind="inflected",
                value=token.value,
                base=token.base,
                case=token.case,
                number=token.number,
                label=token.label,
            )
        case Word():
            return TokenResponse(kind="plain", value=token.value)
    raise TypeError(f"Not a token: {type(token).__name__}")


def scenario_view(
    scenario: Scenario,
    glosses: dict[str, str],
    shuffle: bool = True,
    rng: random.Random | None = None,
) -> ScenarioResponse:
    """Learner-facing view: plain words to pick from and noun tables to decline."""
    return ScenarioResponse(
        id=scenario.id,
        modernTranslation=scenario.modern_translation,
        hint=scenario.hint,
        wordBank=[
            token.value
            for token in scenario.word_bank(shuffle=shuffle, rng=rng)
            if isinstance(token, Word)
        ],
        nouns=[declension_view(d, glosses) for d in scenario.declensions()],
    )


# === Endpoints ===

@router.get("/", response_model=list[ScenarioSummaryResponse])
async def list_scenarios(module: LanguageModule = Depends(get_language_module)):
    """List scenarios in play order."""
    return [
        ScenarioSummaryResponse(
            id=s.id,
            level=level,
            modernTranslation=s.modern_translation,
            hint=s.hint,
            length=len(s.correct_pattern),
        )
        for level, s in enumerate(module.get_scenarios())
    ]


@router.get("/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(
    scenario_id: int,
    shuffle: bool = Query(settings.SHUFFLE_WORD_BANK),
    module: LanguageModule = Depends(get_language_module),
):
    """Get one scenario with its word bank and noun tables."""
    scenario = module.get_scenarios().get(scenario_id)
    return scenario_view(scenario, module.get_glosses(), shuffle=shuffle)
