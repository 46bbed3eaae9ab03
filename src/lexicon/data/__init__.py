"""Sample word lists for the Daily 1 puzzle."""

from typing import Dict, List, Set

from ..models import Lexicon


# Known-incomplete allowlist: a word missing here accepts any synonym
SYNONYMS: Dict[str, List[str]] = {
    "fast": ["swift", "quick", "rapid", "speedy", "brisk"],
    "quick": ["fast", "swift", "rapid", "speedy", "brisk"],
    "swift": ["fast", "quick", "rapid", "speedy"],
    "jay": ["bird", "corvid"],
}

BIRD_WORDS: Set[str] = {
    "swift", "jay", "sparrow", "robin", "wren", "finch", "hawk",
    "owl", "tern", "gull", "crow", "ostrich", "pelican", "flamingo",
}


def default_lexicon() -> Lexicon:
    """Build a fresh Lexicon from the sample word lists."""
    return Lexicon(synonyms=SYNONYMS, bird_words=BIRD_WORDS)


__all__ = ["SYNONYMS", "BIRD_WORDS", "default_lexicon"]
