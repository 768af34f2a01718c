"""Declensions API Routes

Read-only access to the seeded noun paradigms. The frontend enumerates the
case/number buttons of a noun from the `forms` list.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import get_language_module
from languages import LanguageModule
from languages.old_english.declension import Declension

router = APIRouter()


# === Response Models ===

class NumberFormResponse(BaseModel):
    singular: str
    dual: str | None = None
    plural: str


class FormCellResponse(BaseModel):
    case: str
    number: str
    value: str


class DeclensionSummaryResponse(BaseModel):
    base: str
    gender: str
    strength: str
    translation: str | None = None


class DeclensionResponse(DeclensionSummaryResponse):
    cases: dict[str, NumberFormResponse | None]
    forms: list[FormCellResponse]


def declension_view(declension: Declension, glosses: dict[str, str]) -> DeclensionResponse:
    """Full table for one noun, instrumental included as null when absent."""
    data = declension.to_dict()
    return DeclensionResponse(
        base=data["base"],
        gender=data["gender"],
        strength=data["strength"],
        translation=glosses.get(data["base"]),
        cases=data["cases"],
        forms=[
            FormCellResponse(case=case, number=number, value=word.value)
            for case, number, word in declension.forms()
        ],
    )


# === Endpoints ===

@router.get("/", response_model=list[DeclensionSummaryResponse])
async def list_declensions(module: LanguageModule = Depends(get_language_module)):
    """List the seeded nouns."""
    glosses = module.get_glosses()
    return [
        DeclensionSummaryResponse(
            base=d.base.value,
            gender=d.gender,
            strength=d.strength,
            translation=glosses.get(d.base.value),
        )
        for d in module.get_declension_registry()
    ]


@router.get("/{base}", response_model=DeclensionResponse)
async def get_declension(base: str, module: LanguageModule = Depends(get_language_module)):
    """Full declension table for a base form."""
    return declension_view(module.get_declension_registry().get(base), module.get_glosses())
