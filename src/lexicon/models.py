"""Data models for lexical validation."""

from typing import Dict, FrozenSet, List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


ErrorCode = Literal["PREV_NOT_BIRD", "NOT_SYNONYM", "NOT_BIRD", "NO_RHYME"]


class LexicalError(BaseModel):
    """A single validation failure on a link slot or gap word."""
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    word: Optional[str] = None


class Lexicon(BaseModel):
    """
    Word lists backing the lexical rules.

    Attributes:
        synonyms: Known words mapped to their accepted synonyms. Words missing
            from the table are unconstrained.
        bird_words: Words that count as a type of bird.
    """
    model_config = ConfigDict(frozen=True)

    synonyms: Dict[str, List[str]] = Field(default_factory=dict)
    bird_words: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("synonyms")
    @classmethod
    def _lower_synonyms(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        return {
            key.strip().lower(): [w.strip().lower() for w in words]
            for key, words in value.items()
        }

    @field_validator("bird_words")
    @classmethod
    def _lower_birds(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(w.strip().lower() for w in value)

    def is_bird(self, word: str) -> bool:
        """Check whether `word` (any case, surrounding spaces ignored) is a bird."""
        return word.strip().lower() in self.bird_words

    def synonyms_of(self, word: str) -> Optional[List[str]]:
        """Return the accepted synonyms of `word`, or None if it is not in the table."""
        return self.synonyms.get(word.strip().lower())
