"""Root conftest — shared fixtures for the declension model, scenarios and API."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Plain console logs and deterministic word banks under test
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from engines.inflection import InflectedWord  # noqa: E402
from engines.scenarios import Scenario, ScenarioSet  # noqa: E402
from languages.old_english.declension import Declension, DeclensionRegistry  # noqa: E402
from languages.old_english.words import Word  # noqa: E402


def make_cyning() -> Declension:
    return Declension.create(
        base="cyning",
        gender="masculine",
        strength="strong",
        nominative={"singular": "cyning", "plural": "cyningas"},
        accusative={"singular": "cyning", "plural": "cyningas"},
        genitive={"singular": "cyninges", "plural": "cyninga"},
        dative={"singular": "cyninge", "plural": "cyningum"},
    )


def make_biscop() -> Declension:
    return Declension.create(
        base="biscop",
        gender="masculine",
        strength="strong",
        nominative={"singular": "biscop", "plural": "biscopas"},
        accusative={"singular": "biscop", "plural": "biscopas"},
        genitive={"singular": "biscopes", "plural": "biscopa"},
        dative={"singular": "biscope", "plural": "biscopum"},
    )


@pytest.fixture
def cyning() -> Declension:
    return make_cyning()


@pytest.fixture
def biscop() -> Declension:
    return make_biscop()


@pytest.fixture
def registry(cyning, biscop) -> DeclensionRegistry:
    return DeclensionRegistry([cyning, biscop])


@pytest.fixture
def greeting_pattern(cyning, biscop) -> tuple:
    """se cyning grete þone biscop."""
    return (
        Word("se"),
        InflectedWord(cyning, "nominative", "singular"),
        Word("grete"),
        Word("þone"),
        InflectedWord(biscop, "accusative", "singular"),
    )


@pytest.fixture
def scenarios(cyning, biscop, greeting_pattern) -> ScenarioSet:
    """Two levels: the greeting, then 'the bishops greet the king'."""
    return ScenarioSet([
        Scenario(
            id=2,
            modern_translation="The bishops greet the king",
            hint="Who is greeting? More than one.",
            correct_pattern=(
                Word("þa"),
                InflectedWord(biscop, "nominative", "plural"),
                Word("gretaþ"),
                Word("þone"),
                InflectedWord(cyning, "accusative", "singular"),
            ),
        ),
        Scenario(
            id=1,
            modern_translation="The king greets the bishop",
            hint="Who is greeting whom?",
            correct_pattern=greeting_pattern,
        ),
    ])


@pytest.fixture
def client():
    """TestClient running the app lifespan, with an empty session store."""
    from fastapi.testclient import TestClient

    from api import sessions
    from main import app

    sessions._SESSIONS.clear()
    with TestClient(app) as test_client:
        yield test_client
    sessions._SESSIONS.clear()
