"""Declension and DeclensionRegistry tests.

Tests cover:
    - Declension table exposes four cases plus instrumental (None when absent)
    - Table is read-only
    - Invalid gender/strength and malformed forms are rejected
    - Registry lookup, NotFoundError, last-write-wins on duplicate bases
"""

import pytest

from core.errors import ErrorCode, NotFoundError, ValidationError
from languages.old_english.declension import Declension, DeclensionRegistry
from languages.old_english.words import Word


# --- Declension ---------------------------------------------------------------

def test_declination_table_has_five_keys(cyning):
    table = cyning.declination_table()
    assert list(table) == ["nominative", "accusative", "genitive", "dative", "instrumental"]
    assert table["instrumental"] is None


def test_declination_table_forms(cyning):
    table = cyning.declination_table()
    assert table["nominative"].singular == Word("cyning")
    assert table["genitive"].singular == Word("cyninges")
    assert table["dative"].plural == Word("cyningum")


def test_declination_table_is_read_only(cyning):
    table = cyning.declination_table()
    with pytest.raises(TypeError):
        table["nominative"] = None


def test_forms_lists_every_populated_cell(cyning):
    cells = list(cyning.forms())
    assert len(cells) == 8
    assert cells[0] == ("nominative", "singular", Word("cyning"))
    assert ("dative", "plural", Word("cyningum")) in cells


def test_instrumental_when_supplied():
    declension = Declension.create(
        base="dæg",
        gender="masculine",
        strength="strong",
        nominative={"singular": "dæg", "plural": "dagas"},
        accusative={"singular": "dæg", "plural": "dagas"},
        genitive={"singular": "dæges", "plural": "daga"},
        dative={"singular": "dæge", "plural": "dagum"},
        instrumental={"singular": "dæge", "plural": "dagum"},
    )
    assert declension.declination_table()["instrumental"].singular == Word("dæge")
    assert len(list(declension.forms())) == 10


def test_invalid_gender_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Declension.create(
            base="cyning",
            gender="common",
            strength="strong",
            nominative={"singular": "cyning", "plural": "cyningas"},
            accusative={"singular": "cyning", "plural": "cyningas"},
            genitive={"singular": "cyninges", "plural": "cyninga"},
            dative={"singular": "cyninge", "plural": "cyningum"},
        )
    assert exc_info.value.code == ErrorCode.E2007_INVALID_CHOICE


def test_malformed_form_rejected():
    with pytest.raises(ValidationError):
        Declension.create(
            base="cyning",
            gender="masculine",
            strength="strong",
            nominative={"singular": "cyning", "plural": "cyningas"},
            accusative={"singular": "", "plural": "cyningas"},
            genitive={"singular": "cyninges", "plural": "cyninga"},
            dative={"singular": "cyninge", "plural": "cyningum"},
        )


def test_to_dict_keeps_instrumental_key(cyning):
    data = cyning.to_dict()
    assert data["base"] == "cyning"
    assert data["cases"]["instrumental"] is None
    assert data["cases"]["accusative"] == {"singular": "cyning", "dual": None, "plural": "cyningas"}


# --- DeclensionRegistry -------------------------------------------------------

def test_registry_get(registry, cyning):
    assert registry.get("cyning") == cyning
    assert "biscop" in registry
    assert len(registry) == 2
    assert registry.bases() == ["cyning", "biscop"]


def test_registry_unknown_base_raises_not_found(registry):
    with pytest.raises(NotFoundError) as exc_info:
        registry.get("ealdormann")
    assert exc_info.value.code == ErrorCode.E4010_NOT_FOUND


def test_registry_not_found_is_lookup_error(registry):
    with pytest.raises(LookupError):
        registry.get("ealdormann")


def test_registry_lookup_returns_err(registry):
    result = registry.lookup("ealdormann")
    assert result.is_err()
    assert result.unwrap_err().metadata["entity_id"] == "ealdormann"


def test_registry_duplicate_base_last_write_wins(cyning):
    replacement = Declension.create(
        base="cyning",
        gender="masculine",
        strength="weak",
        nominative={"singular": "cyning", "plural": "cyningan"},
        accusative={"singular": "cyning", "plural": "cyningan"},
        genitive={"singular": "cyninges", "plural": "cyningena"},
        dative={"singular": "cyninge", "plural": "cyningum"},
    )
    registry = DeclensionRegistry([cyning, replacement])
    assert len(registry) == 1
    assert registry.get("cyning").strength == "weak"
