"""Teaching scenarios.

A Scenario pairs a Modern English gloss and a hint with the Old English token
sequence the learner has to assemble. Scenarios are built once from seed
content and played in id order.
"""
from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.errors import (
    AppError,
    Ok,
    Result,
    duplicate_id,
    not_found,
    out_of_range,
    raise_error,
    raise_result,
)
from core.logging import content_logger
from languages.old_english.declension import Declension, DeclensionRegistry
from languages.old_english.words import Word
from .inflection import InflectedWord, Token

if TYPE_CHECKING:
    from languages.old_english.content import ScenarioSeed

log = content_logger()


@dataclass(frozen=True, slots=True)
class Scenario:
    """One teaching unit."""
    id: int
    modern_translation: str
    hint: str
    correct_pattern: tuple[Token, ...]

    def word_bank(self, shuffle: bool = True, rng: random.Random | None = None) -> list[Token]:
        """Tokens offered to the learner, shuffled unless asked otherwise."""
        tokens = list(self.correct_pattern)
        if shuffle:
            (rng or random).shuffle(tokens)
        return tokens

    def declensions(self) -> list[Declension]:
        """Distinct declensions referenced by the pattern, in first-use order."""
        seen: dict[str, Declension] = {}
        for token in self.correct_pattern:
            if isinstance(token, InflectedWord):
                seen.setdefault(token.base, token.declension)
        return list(seen.values())


class ScenarioSet:
    """Ordered, read-only collection of scenarios. Level n is the n-th id."""

    __slots__ = ("_scenarios", "_by_id")

    def __init__(self, scenarios: Iterable[Scenario]):
        by_id: dict[int, Scenario] = {}
        for scenario in scenarios:
            if isinstance(scenario.id, bool) or not isinstance(scenario.id, int) or scenario.id < 1:
                raise_error(out_of_range("id", scenario.id, min_val=1, origin="engines.scenarios").error)
            if scenario.id in by_id:
                raise_error(duplicate_id("Scenario", scenario.id, origin="engines.scenarios").error)
            by_id[scenario.id] = scenario
        self._scenarios = tuple(by_id[i] for i in sorted(by_id))
        self._by_id = by_id

    def lookup(self, scenario_id: int) -> Result[Scenario, AppError]:
        scenario = self._by_id.get(scenario_id)
        if scenario is None:
            return not_found("Scenario", scenario_id, origin="engines.scenarios")
        return Ok(scenario)

    def get(self, scenario_id: int) -> Scenario:
        """Scenario by id. Raises NotFoundError when unknown."""
        result = self.lookup(scenario_id)
        raise_result(result)
        return result.unwrap()

    def at_level(self, level: int) -> Scenario | None:
        """Scenario played at a zero-based level, None past the last one."""
        if 0 <= level < len(self._scenarios):
            return self._scenarios[level]
        return None

    def __getitem__(self, level: int) -> Scenario:
        return self._scenarios[level]

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)


def build_scenarios(seeds: Iterable[ScenarioSeed], registry: DeclensionRegistry) -> ScenarioSet:
    """Resolve scenario seeds against the registry.

    Unknown nouns raise NotFoundError and undefined case/number picks raise
    ResolutionError; both abort startup.
    """
    scenarios = []
    for seed in seeds:
        pattern: list[Token] = []
        for slot in seed.pattern:
            if isinstance(slot, str):
                pattern.append(Word(slot))
            else:
                pattern.append(InflectedWord(registry.get(slot.noun), slot.case, slot.number))
        scenarios.append(Scenario(
            id=seed.id,
            modern_translation=seed.modern_translation,
            hint=seed.hint,
            correct_pattern=tuple(pattern),
        ))
        log.debug("scenario_built", scenario_id=seed.id, tokens=len(pattern))
    return ScenarioSet(scenarios)
