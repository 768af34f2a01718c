"""Old English seed content loader.

Nouns and scenarios are authored as YAML next to this module, validated with
pydantic, and cached for the life of the process. Any malformed record aborts
loading: seed data is static, so a failure here means the content is corrupt.
"""
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationError, not_found, raise_error, validation_error
from core.logging import content_logger
from languages.types import Gender, GrammaticalNumber, InflectableCase, Strength
from .declension import Declension, DeclensionRegistry

log = content_logger()

CONTENT_DIR = Path(__file__).parent / "content"

CONTENT_FILES = {
    "nouns": "nouns.yaml",
    "scenarios": "scenarios.yaml",
}


class NumberFormSeed(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    singular: str
    plural: str
    dual: str | None = None


class NounSeed(BaseModel):
    """One noun paradigm as written in nouns.yaml."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base: str
    gender: Gender
    strength: Strength
    translation: str | None = None
    nominative: NumberFormSeed
    accusative: NumberFormSeed
    genitive: NumberFormSeed
    dative: NumberFormSeed
    instrumental: NumberFormSeed | None = None

    def to_declension(self) -> Declension:
        return Declension.create(**self.model_dump(exclude={"translation"}))


class InflectedSeed(BaseModel):
    """A pattern slot that picks one cell of a noun's table."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    noun: str
    case: InflectableCase
    number: GrammaticalNumber


class ScenarioSeed(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: PositiveInt
    modern_translation: str
    hint: str
    pattern: list[str | InflectedSeed] = Field(min_length=1)


def _load_yaml(filepath: Path) -> dict:
    """Load a content file. Raises NotFoundError when it is missing."""
    if not filepath.exists():
        raise_error(not_found("Content file", str(filepath), origin="old_english.content").error)
    with filepath.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _parse(model: type[BaseModel], records: list[dict], filename: str) -> tuple:
    try:
        return tuple(model.model_validate(record) for record in records)
    except PydanticValidationError as exc:
        error = validation_error(
            f"Invalid seed content in {filename}",
            origin="old_english.content",
            errors=exc.errors(include_url=False, include_context=False),
        ).error
        raise ValidationError(error) from exc


@lru_cache(maxsize=1)
def get_noun_seeds() -> tuple[NounSeed, ...]:
    """All noun paradigms from nouns.yaml."""
    filename = CONTENT_FILES["nouns"]
    seeds = _parse(NounSeed, _load_yaml(CONTENT_DIR / filename).get("nouns", []), filename)
    log.debug("noun_seeds_loaded", count=len(seeds))
    return seeds


@lru_cache(maxsize=1)
def get_scenario_seeds() -> tuple[ScenarioSeed, ...]:
    """All scenarios from scenarios.yaml, in file order."""
    filename = CONTENT_FILES["scenarios"]
    seeds = _parse(ScenarioSeed, _load_yaml(CONTENT_DIR / filename).get("scenarios", []), filename)
    log.debug("scenario_seeds_loaded", count=len(seeds))
    return seeds


def get_glosses() -> dict[str, str]:
    """Modern English gloss per noun base, where the seed gives one."""
    return {seed.base: seed.translation for seed in get_noun_seeds() if seed.translation}


def build_registry(seeds: tuple[NounSeed, ...] | None = None) -> DeclensionRegistry:
    """Build the declension registry from noun seeds (default: nouns.yaml)."""
    seeds = get_noun_seeds() if seeds is None else seeds
    return DeclensionRegistry(seed.to_declension() for seed in seeds)
