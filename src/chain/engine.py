"""
Chain engine: the state machine behind a word-chain puzzle.

Every transition is a pure function taking the current ChainState and
returning the next one. ChainEngine owns a single state reference and swaps
it after each user action, so callers never observe a half-applied change.
"""

import logging
from typing import List, Optional

from .models import (
    ChainState,
    ChainAction,
    ClickSlot,
    GapWord,
    PuzzleConfig,
    SelectCategory,
    SetGapWord,
)
from .puzzle import default_puzzle
from .view import ChainView, build_view
from ..lexicon.models import LexicalError
from ..lexicon.rules import check_gap_word, check_placement

logger = logging.getLogger(__name__)


def select_category(state: ChainState, category_id: str) -> ChainState:
    """
    Toggle the armed category.

    Selecting the armed category disarms it; selecting any other replaces it.

    Raises:
        ValueError: If the puzzle does not offer `category_id`
    """
    state.puzzle.get_category(category_id)
    selection = None if state.selection == category_id else category_id
    logger.debug("Selection %s -> %s", state.selection, selection)
    return state.model_copy(update={"selection": selection})


def click_slot(state: ChainState, slot_index: int) -> ChainState:
    """
    Place the armed category on a slot, or erase the slot.

    With nothing armed the slot's category and error are cleared. With a
    category armed, a bird link is refused unless the word before the slot
    is a bird; any other placement moves the category onto this slot,
    taking it off whichever slot held it. The selection is disarmed after
    every placement attempt, refused or not.

    Args:
        state: Current chain state
        slot_index: Slot to click (0-based)

    Returns:
        The next chain state

    Raises:
        ValueError: If `slot_index` is out of range
    """
    state.check_slot_index(slot_index)
    slots = list(state.slots)
    chosen = state.selection

    if chosen is None:
        slots[slot_index] = slots[slot_index].model_copy(
            update={"category": None, "error": None}
        )
        logger.debug("Cleared slot %d", slot_index)
        return _revalidate(state.model_copy(update={"slots": slots}))

    prev_word = state.word_before(slot_index)
    error = check_placement(chosen, prev_word, state.puzzle.lexicon)
    if error is not None:
        slots[slot_index] = slots[slot_index].model_copy(update={"error": error})
        logger.debug(
            "Refused %s on slot %d after %r: %s",
            chosen, slot_index, prev_word, error.code,
        )
        return state.model_copy(update={"slots": slots, "selection": None})

    for i, slot in enumerate(slots):
        if i != slot_index and slot.category == chosen:
            slots[i] = slot.model_copy(update={"category": None})
    slots[slot_index] = slots[slot_index].model_copy(
        update={"category": chosen, "error": None}
    )
    logger.debug("Placed %s on slot %d", chosen, slot_index)
    return _revalidate(state.model_copy(update={"slots": slots, "selection": None}))


def set_gap_word(state: ChainState, gap_index: int, text: str) -> ChainState:
    """
    Store a gap's text verbatim and re-judge it.

    Raises:
        ValueError: If `gap_index` is out of range
    """
    state.check_gap_index(gap_index)
    gaps = list(state.gaps)
    gaps[gap_index] = gaps[gap_index].model_copy(update={"text": text})
    logger.debug("Gap %d set to %r", gap_index, text)
    return _revalidate(state.model_copy(update={"gaps": gaps}))


def apply_action(state: ChainState, action: ChainAction) -> ChainState:
    """Dispatch a user action to its transition."""
    if isinstance(action, SelectCategory):
        return select_category(state, action.category)
    if isinstance(action, ClickSlot):
        return click_slot(state, action.slot)
    if isinstance(action, SetGapWord):
        return set_gap_word(state, action.gap, action.text)
    raise ValueError(f"Unknown action: {action!r}")


def judge_gap(state: ChainState, gap_index: int) -> Optional[LexicalError]:
    """Judge gap `gap_index` against its slot's category and the word before it."""
    gap = state.gaps[gap_index]
    return check_gap_word(
        state.slots[gap_index].category,
        gap.text,
        state.word_before(gap_index),
        state.puzzle.lexicon,
    )


def _revalidate(state: ChainState) -> ChainState:
    """
    Re-judge every gap.

    A gap's verdict depends on its slot's category and on the previous gap's
    text, so an edit or placement upstream can raise or clear errors further
    down the chain.
    """
    gaps: List[GapWord] = []
    for gap in state.gaps:
        error = judge_gap(state, gap.index)
        if error != gap.error:
            gap = gap.model_copy(update={"error": error})
        gaps.append(gap)
    return state.model_copy(update={"gaps": gaps})


class ChainEngine:
    """
    Owner of the chain state for one puzzle session.

    The engine holds the only reference to the current ChainState and
    replaces it with the result of each transition.

    Attributes:
        puzzle: The puzzle being played
        state: The current chain state
    """

    def __init__(self, puzzle: Optional[PuzzleConfig] = None):
        self.puzzle = puzzle or default_puzzle()
        self.state = ChainState.create(self.puzzle)
        logger.info(
            "Started '%s': %s -> %s with %d links",
            self.puzzle.title, self.puzzle.start_word, self.puzzle.end_word,
            self.puzzle.num_links,
        )

    def select_category(self, category_id: str) -> ChainState:
        self.state = select_category(self.state, category_id)
        return self.state

    def click_slot(self, slot_index: int) -> ChainState:
        self.state = click_slot(self.state, slot_index)
        return self.state

    def set_gap_word(self, gap_index: int, text: str) -> ChainState:
        self.state = set_gap_word(self.state, gap_index, text)
        return self.state

    def apply(self, action: ChainAction) -> ChainState:
        self.state = apply_action(self.state, action)
        return self.state

    def view(self) -> ChainView:
        """Build the read model of the current state for rendering."""
        return build_view(self.state)
