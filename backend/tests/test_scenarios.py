"""Scenario and ScenarioSet tests.

Tests cover:
    - Scenarios are played in id order regardless of input order
    - Duplicate and non-positive ids are rejected
    - Level and id lookups
    - Word bank holds the pattern's tokens; shuffling is seedable
    - Distinct declensions of a scenario
"""

import random

import pytest

from core.errors import ErrorCode, NotFoundError, ValidationError
from engines.inflection import InflectedWord
from engines.scenarios import Scenario, ScenarioSet
from languages.old_english.words import Word


def _scenario(scenario_id: int, *tokens) -> Scenario:
    return Scenario(
        id=scenario_id,
        modern_translation=f"Scenario {scenario_id}",
        hint="",
        correct_pattern=tuple(tokens) or (Word("hwæt"),),
    )


# --- ScenarioSet --------------------------------------------------------------

def test_scenarios_ordered_by_id(scenarios):
    assert [s.id for s in scenarios] == [1, 2]
    assert scenarios[0].modern_translation == "The king greets the bishop"


def test_duplicate_id_rejected():
    with pytest.raises(ValidationError) as exc_info:
        ScenarioSet([_scenario(1), _scenario(1)])
    assert exc_info.value.code == ErrorCode.E2008_DUPLICATE_ID


@pytest.mark.parametrize("scenario_id", [0, -3])
def test_non_positive_id_rejected(scenario_id):
    with pytest.raises(ValidationError) as exc_info:
        ScenarioSet([_scenario(scenario_id)])
    assert exc_info.value.code == ErrorCode.E2003_OUT_OF_RANGE


def test_at_level_past_the_end_is_none(scenarios):
    assert scenarios.at_level(1).id == 2
    assert scenarios.at_level(2) is None
    assert scenarios.at_level(-1) is None


def test_get_by_id(scenarios):
    assert scenarios.get(2).hint == "Who is greeting? More than one."


def test_get_unknown_id_raises_not_found(scenarios):
    with pytest.raises(NotFoundError):
        scenarios.get(99)
    assert scenarios.lookup(99).is_err()


def test_empty_set():
    assert len(ScenarioSet([])) == 0


# --- Scenario -----------------------------------------------------------------

def test_word_bank_unshuffled_is_the_pattern(scenarios):
    scenario = scenarios.get(1)
    assert scenario.word_bank(shuffle=False) == list(scenario.correct_pattern)


def test_word_bank_shuffle_keeps_tokens(scenarios):
    scenario = scenarios.get(1)
    bank = scenario.word_bank(rng=random.Random(7))
    assert sorted(t.value for t in bank) == sorted(t.value for t in scenario.correct_pattern)


def test_word_bank_shuffle_is_seedable(scenarios):
    scenario = scenarios.get(1)
    first = scenario.word_bank(rng=random.Random("level-0"))
    second = scenario.word_bank(rng=random.Random("level-0"))
    assert first == second


def test_declensions_are_distinct_in_first_use_order(cyning, biscop):
    scenario = _scenario(
        1,
        InflectedWord(biscop, "genitive", "singular"),
        Word("and"),
        InflectedWord(cyning, "nominative", "singular"),
        InflectedWord(biscop, "dative", "plural"),
    )
    assert scenario.declensions() == [biscop, cyning]
