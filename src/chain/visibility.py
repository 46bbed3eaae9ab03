"""
Derived visibility of the chain.

Nothing here is stored on the state: every flag is recomputed from the
current ChainState, so a change anywhere upstream is reflected on the next
read. Disclosure runs strictly left to right:

    slot 0 -> gap 0 (slot 0 linked) -> slot 1 (gap 0 accepted) -> gap 1 ...

so hiding a slot hides everything after it.
"""

from typing import List

from .models import ChainState


def gap_valid(state: ChainState, gap_index: int) -> bool:
    """A gap is accepted when its slot is linked and its text is non-blank and error-free."""
    state.check_gap_index(gap_index)
    gap = state.gaps[gap_index]
    return (
        state.slots[gap_index].category is not None
        and bool(gap.text.strip())
        and gap.error is None
    )


def slot_visible(state: ChainState, slot_index: int) -> bool:
    state.check_slot_index(slot_index)
    if slot_index == 0:
        return True
    prev = slot_index - 1
    return gap_visible(state, prev) and gap_valid(state, prev)


def gap_visible(state: ChainState, gap_index: int) -> bool:
    state.check_gap_index(gap_index)
    return (
        slot_visible(state, gap_index)
        and state.slots[gap_index].category is not None
    )


def visible_slots(state: ChainState) -> List[int]:
    """Indices of the slots currently on screen."""
    return [s.index for s in state.slots if slot_visible(state, s.index)]


def visible_gaps(state: ChainState) -> List[int]:
    """Indices of the gaps currently on screen."""
    return [g.index for g in state.gaps if gap_visible(state, g.index)]
