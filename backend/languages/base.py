"""Abstract base class for language modules."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engines.scenarios import ScenarioSet
    from languages.old_english.declension import DeclensionRegistry


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    hint: str  # The question the case answers, shown next to the case buttons
    color_bg: str
    color_text: str
    optional: bool = False


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Configuration for a grammatical gender."""
    id: str
    label: str
    short: str  # Single letter abbreviation


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Configuration for grammatical number."""
    id: str
    label: str


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for frontend."""
    cases: list[CaseConfig] = field(default_factory=list)
    genders: list[GenderConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "cases": [
                {"id": c.id, "label": c.label, "hint": c.hint, "optional": c.optional,
                 "color": {"bg": c.color_bg, "text": c.color_text}}
                for c in self.cases
            ],
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "strengths": list(self.strengths),
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639 language code (e.g., 'ang')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for frontend."""
        ...

    @abstractmethod
    def get_declension_registry(self) -> DeclensionRegistry:
        """Get the registry of declined nouns for this language."""
        ...

    @abstractmethod
    def get_scenarios(self) -> ScenarioSet:
        """Get the ordered teaching scenarios for this language."""
        ...

    def get_glosses(self) -> dict[str, str]:
        """Modern English gloss per noun base. Override when the content supplies them."""
        return {}

    def generate_form(self, lemma: str, case: str, number: str = "singular") -> str | None:
        """Look up an inflected form in the seeded tables. None when not supplied."""
        registry = self.get_declension_registry()
        if lemma not in registry:
            return None
        form = registry.get(lemma).declination_table().get(case)
        if form is None:
            return None
        word = form.get(number)
        return word.value if word else None
