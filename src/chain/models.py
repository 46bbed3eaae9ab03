"""
Pydantic models for the chain layer.

This module contains the puzzle configuration, the chain state and the user
actions that drive it. The transition functions live in engine.py and the
derived visibility in visibility.py; nothing here holds mutable globals.
"""

from typing import Annotated, List, Optional, Literal, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from ..lexicon.models import Lexicon, LexicalError
from ..lexicon.data import default_lexicon


# Type aliases
CategoryId = Literal["synonym", "rhyme", "bird"]


class Category(BaseModel):
    """A link type the player can place on a slot."""
    model_config = ConfigDict(frozen=True)

    id: CategoryId
    label: str


CATEGORIES: List[Category] = [
    Category(id="synonym", label="Synonym"),
    Category(id="rhyme", label="Rhyme"),
    Category(id="bird", label="Type of Bird"),
]


class LinkSlot(BaseModel):
    """A link position in the chain and the category placed on it."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    category: Optional[CategoryId] = None
    error: Optional[LexicalError] = None


class GapWord(BaseModel):
    """The word typed after link `index`, judged against that link's category."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    text: str = ""  # Stored as typed, never trimmed
    error: Optional[LexicalError] = None


class PuzzleConfig(BaseModel):
    """
    Fixed data for one puzzle instance.

    Attributes:
        title: Display name of the puzzle
        start_word: Given first word of the chain
        end_word: Given last word of the chain
        num_links: Number of link slots; there is one gap fewer
        categories: Link types on offer, each usable once
        lexicon: Word lists backing the category rules
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = "Daily 1"
    start_word: str = Field(..., min_length=1)
    end_word: str = Field(..., min_length=1)
    num_links: int = Field(default=3, ge=1)
    categories: List[Category] = Field(default_factory=lambda: list(CATEGORIES))
    lexicon: Lexicon = Field(default_factory=default_lexicon)

    @field_validator("categories")
    @classmethod
    def _unique_categories(cls, value: List[Category]) -> List[Category]:
        ids = [c.id for c in value]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate category ids: {', '.join(duplicates)}")
        if not value:
            raise ValueError("A puzzle needs at least one category")
        return value

    @property
    def num_gaps(self) -> int:
        return self.num_links - 1

    def get_category(self, category_id: str) -> Category:
        """
        Look up a category offered by this puzzle.

        Raises:
            ValueError: If the puzzle does not offer `category_id`
        """
        for category in self.categories:
            if category.id == category_id:
                return category
        raise ValueError(
            f"Unknown category '{category_id}' "
            f"(expected one of: {', '.join(c.id for c in self.categories)})"
        )


class ChainState(BaseModel):
    """
    Complete state of a chain being built.

    States are never mutated in place; every transition in engine.py returns
    a new ChainState.

    Attributes:
        puzzle: The puzzle being played
        selection: Category currently armed for placement, if any
        slots: One LinkSlot per link, in chain order
        gaps: One GapWord between each pair of consecutive links
    """
    model_config = ConfigDict(frozen=True)

    puzzle: PuzzleConfig
    selection: Optional[CategoryId] = None
    slots: List[LinkSlot] = Field(default_factory=list)
    gaps: List[GapWord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> "ChainState":
        if len(self.slots) != self.puzzle.num_links:
            raise ValueError(
                f"Expected {self.puzzle.num_links} slots, got {len(self.slots)}"
            )
        if len(self.gaps) != self.puzzle.num_gaps:
            raise ValueError(
                f"Expected {self.puzzle.num_gaps} gaps, got {len(self.gaps)}"
            )
        return self

    @classmethod
    def create(cls, puzzle: PuzzleConfig) -> "ChainState":
        """
        Factory method to create an empty chain for a puzzle.

        Args:
            puzzle: The puzzle to play

        Returns:
            A ChainState with no selection, unassigned slots and blank gaps
        """
        return cls(
            puzzle=puzzle,
            slots=[LinkSlot(index=i) for i in range(puzzle.num_links)],
            gaps=[GapWord(index=i) for i in range(puzzle.num_gaps)],
        )

    def check_slot_index(self, slot_index: int) -> None:
        if not 0 <= slot_index < len(self.slots):
            raise ValueError(
                f"Slot index {slot_index} out of range (0..{len(self.slots) - 1})"
            )

    def check_gap_index(self, gap_index: int) -> None:
        if not 0 <= gap_index < len(self.gaps):
            raise ValueError(
                f"Gap index {gap_index} out of range ({len(self.gaps)} gaps)"
            )

    def word_before(self, index: int) -> str:
        """
        The word preceding slot `index` (and hence gap `index`).

        This is the start word for index 0, otherwise the text of the gap
        before it, which may still be blank.
        """
        if index == 0:
            return self.puzzle.start_word
        return self.gaps[index - 1].text

    def slot_holding(self, category_id: str) -> Optional[int]:
        """Index of the slot holding `category_id`, or None if it is unplaced."""
        for slot in self.slots:
            if slot.category == category_id:
                return slot.index
        return None


class SelectCategory(BaseModel):
    """Arm a category, or disarm it if it is already armed."""
    kind: Literal["select_category"] = "select_category"
    category: str


class ClickSlot(BaseModel):
    """Place the armed category on a slot, or clear the slot if none is armed."""
    kind: Literal["click_slot"] = "click_slot"
    slot: int


class SetGapWord(BaseModel):
    """Replace the text of a gap."""
    kind: Literal["set_gap_word"] = "set_gap_word"
    gap: int
    text: str = ""


ChainAction = Annotated[
    Union[SelectCategory, ClickSlot, SetGapWord],
    Field(discriminator="kind"),
]
