"""Answer matching.

Compares a learner-built token sequence against a scenario's target.
Inflected tokens match on grammar (case and number), not on which noun
was inflected; plain words match on their exact surface string.
"""
from collections.abc import Sequence

from languages.old_english.words import Word
from .inflection import InflectedWord, Token


def tokens_match(candidate: Token, target: Token) -> bool:
    """Pairwise comparison of one candidate token against one target token."""
    match candidate, target:
        case InflectedWord() as inflected, InflectedWord() as expected:
            return inflected.case == expected.case and inflected.number == expected.number
        case Word() as word, Word() as expected:
            return word.value == expected.value
        case (Word() | InflectedWord()), (Word() | InflectedWord()):
            # One plain, one inflected
            return False
    raise TypeError(
        f"Cannot compare {type(candidate).__name__} with {type(target).__name__}"
    )


def check(candidate: Sequence[Token], target: Sequence[Token]) -> bool:
    """True iff the candidate matches the target token for token.

    An empty candidate is never correct, even against an empty target.
    """
    if not candidate:
        return False
    if len(candidate) != len(target):
        return False
    return all(tokens_match(c, t) for c, t in zip(candidate, target))


def first_mismatch(candidate: Sequence[Token], target: Sequence[Token]) -> int | None:
    """Index of the first position that does not match, or None when all match.

    A length difference counts as a mismatch at the end of the shorter sequence.
    """
    for index, (c, t) in enumerate(zip(candidate, target)):
        if not tokens_match(c, t):
            return index
    if len(candidate) != len(target):
        return min(len(candidate), len(target))
    return None
