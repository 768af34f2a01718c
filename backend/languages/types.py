"""Shared type definitions for language modules."""
from typing import Literal

# Cases a declension table can hold; instrumental is optional in Old English tables
GrammaticalCase = Literal["nominative", "accusative", "genitive", "dative", "instrumental"]

# Cases a learner can pick for an inflected token
InflectableCase = Literal["nominative", "accusative", "genitive", "dative"]

GrammaticalNumber = Literal["singular", "dual", "plural"]

Gender = Literal["masculine", "feminine", "neuter"]

Strength = Literal["strong", "weak"]
