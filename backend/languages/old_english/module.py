"""Old English language module implementation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from core.logging import content_logger
from languages.base import LanguageModule, GrammarConfig
from .content import build_registry, get_glosses, get_scenario_seeds
from .declension import DeclensionRegistry
from .grammar import OLD_ENGLISH_GRAMMAR_CONFIG

if TYPE_CHECKING:
    from engines.scenarios import ScenarioSet

log = content_logger()


class OldEnglishModule(LanguageModule):
    """Old English noun declension with seeded paradigms and scenarios."""

    __slots__ = ("_registry", "_scenarios")

    def __init__(self):
        self._registry: DeclensionRegistry | None = None
        self._scenarios: ScenarioSet | None = None

    @property
    def code(self) -> str:
        return "ang"

    @property
    def name(self) -> str:
        return "Old English"

    @property
    def native_name(self) -> str:
        return "Englisc"

    def get_grammar_config(self) -> GrammarConfig:
        return OLD_ENGLISH_GRAMMAR_CONFIG

    def get_declension_registry(self) -> DeclensionRegistry:
        """Get the declension registry (built from nouns.yaml on first use)."""
        if self._registry is None:
            self._registry = build_registry()
            log.info("declensions_loaded", language=self.code, count=len(self._registry))
        return self._registry

    def get_glosses(self) -> dict[str, str]:
        return get_glosses()

    def get_scenarios(self) -> ScenarioSet:
        """Get the scenario set (built from scenarios.yaml on first use)."""
        if self._scenarios is None:
            from engines.scenarios import build_scenarios

            self._scenarios = build_scenarios(get_scenario_seeds(), self.get_declension_registry())
            log.info("scenarios_loaded", language=self.code, count=len(self._scenarios))
        return self._scenarios

