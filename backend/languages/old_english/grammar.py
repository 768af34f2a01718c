"""Old English grammar configuration for frontend."""
from languages.base import CaseConfig, GenderConfig, NumberConfig, GrammarConfig
from .maps import STRENGTHS

CASE_CONFIGS = [
    CaseConfig(
        id="nominative",
        label="Nominative",
        hint="Who is doing the action?",
        color_bg="bg-blue-100",
        color_text="text-blue-700",
    ),
    CaseConfig(
        id="accusative",
        label="Accusative",
        hint="Who receives the action?",
        color_bg="bg-purple-100",
        color_text="text-purple-700",
    ),
    CaseConfig(
        id="genitive",
        label="Genitive",
        hint="Who owns it? (of whom?)",
        color_bg="bg-green-100",
        color_text="text-green-700",
    ),
    CaseConfig(
        id="dative",
        label="Dative",
        hint="To whom? From where? (often after 'fram', 'to', 'mid')",
        color_bg="bg-orange-100",
        color_text="text-orange-700",
    ),
    CaseConfig(
        id="instrumental",
        label="Instrumental",
        hint="By what means? (rare; usually merged with the dative)",
        color_bg="bg-pink-100",
        color_text="text-pink-700",
        optional=True,
    ),
]

GENDER_CONFIGS = [
    GenderConfig(id="masculine", label="Masculine", short="m"),
    GenderConfig(id="feminine", label="Feminine", short="f"),
    GenderConfig(id="neuter", label="Neuter", short="n"),
]

NUMBER_CONFIGS = [
    NumberConfig(id="singular", label="Singular"),
    NumberConfig(id="dual", label="Dual"),
    NumberConfig(id="plural", label="Plural"),
]

OLD_ENGLISH_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    genders=GENDER_CONFIGS,
    numbers=NUMBER_CONFIGS,
    strengths=list(STRENGTHS),
)
