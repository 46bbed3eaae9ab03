"""Word lists and lexical rules for link categories."""

from .models import ErrorCode, LexicalError, Lexicon
from .rhyme import rhyme_key, rhymes_with
from .rules import check_synonym, check_bird, check_rhyme, check_gap_word, check_placement
from .data import SYNONYMS, BIRD_WORDS, default_lexicon

__all__ = [
    # Models
    "ErrorCode",
    "LexicalError",
    "Lexicon",
    # Rhyme
    "rhyme_key",
    "rhymes_with",
    # Rules
    "check_synonym",
    "check_bird",
    "check_rhyme",
    "check_gap_word",
    "check_placement",
    # Sample data
    "SYNONYMS",
    "BIRD_WORDS",
    "default_lexicon",
]
