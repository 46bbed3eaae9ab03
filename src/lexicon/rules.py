"""
Lexical rules for link categories.

Each rule compares a gap word against the word before it in the chain and
returns a LexicalError, or None when the word is acceptable. Comparison is on
the trimmed, lower-cased words; messages quote the previous word as typed.
"""

from typing import Optional

from .models import Lexicon, LexicalError
from .rhyme import rhymes_with


def check_synonym(word: str, prev: str, lexicon: Lexicon) -> Optional[LexicalError]:
    """A previous word missing from the synonym table accepts anything."""
    synonyms = lexicon.synonyms_of(prev)
    if synonyms is not None and word.strip().lower() not in synonyms:
        return LexicalError(
            code="NOT_SYNONYM",
            message=f'Should be a synonym of "{prev}".',
            word=word,
        )
    return None


def check_bird(word: str, lexicon: Lexicon) -> Optional[LexicalError]:
    if not lexicon.is_bird(word):
        return LexicalError(
            code="NOT_BIRD",
            message="Should be a type of bird.",
            word=word,
        )
    return None


def check_rhyme(word: str, prev: str) -> Optional[LexicalError]:
    if not rhymes_with(word, prev):
        return LexicalError(
            code="NO_RHYME",
            message=f'Should rhyme with "{prev}".',
            word=word,
        )
    return None


def check_gap_word(
    category: Optional[str],
    word: str,
    prev: str,
    lexicon: Lexicon,
) -> Optional[LexicalError]:
    """
    Judge a gap word against the category of the link before it.

    Args:
        category: Category id of the link ("synonym", "rhyme", "bird") or None
        word: The gap word as typed
        prev: The previous word in the chain as typed
        lexicon: Word lists backing the rules

    Returns:
        The validation error, or None. An unlinked gap or a blank word is not
        judged at all.
    """
    if category is None or not word.strip():
        return None

    if category == "synonym":
        return check_synonym(word, prev, lexicon)
    if category == "bird":
        return check_bird(word, lexicon)
    if category == "rhyme":
        return check_rhyme(word, prev)

    raise ValueError(f"Unknown category: {category}")


def check_placement(
    category: str,
    prev: str,
    lexicon: Lexicon,
) -> Optional[LexicalError]:
    """
    Check whether a category may be placed after `prev`.

    Only the bird link has a placement rule: the word before it must itself
    be a bird.
    """
    if category == "bird" and not lexicon.is_bird(prev):
        return LexicalError(
            code="PREV_NOT_BIRD",
            message="Previous word must be a type of bird.",
            word=prev or None,
        )
    return None
