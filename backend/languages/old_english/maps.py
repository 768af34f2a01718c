"""Old English grammatical category orderings."""

# Declension table order; instrumental is optional and comes last
CASES = ("nominative", "accusative", "genitive", "dative", "instrumental")

# Cases offered to learners for inflected tokens
INFLECTABLE_CASES = ("nominative", "accusative", "genitive", "dative")

NUMBERS = ("singular", "dual", "plural")

GENDERS = ("masculine", "feminine", "neuter")

STRENGTHS = ("strong", "weak")
