"""
Test suite for derived visibility.

Disclosure is strictly left to right: a gap shows once its link is placed,
and the next link shows once that gap is accepted. Hiding anything hides
everything after it.
"""

import pytest
from src.chain import (
    ChainState,
    click_slot,
    default_puzzle,
    gap_valid,
    gap_visible,
    select_category,
    set_gap_word,
    slot_visible,
    visible_gaps,
    visible_slots,
)


def place(state, category_id, slot_index):
    return click_slot(select_category(state, category_id), slot_index)


@pytest.fixture
def state():
    return ChainState.create(default_puzzle())


@pytest.fixture
def full_state(state):
    """Fast -> swift -> jay -> Day with every link placed."""
    state = place(state, "synonym", 0)
    state = set_gap_word(state, 0, "swift")
    state = place(state, "bird", 1)
    state = set_gap_word(state, 1, "jay")
    return place(state, "rhyme", 2)


class TestInitialVisibility:
    """Test cases for a fresh chain."""

    def test_only_first_slot(self, state):
        """Only slot 0 is on screen at the start."""
        assert visible_slots(state) == [0]
        assert visible_gaps(state) == []

    def test_gap_hidden_until_linked(self, state):
        """Typing into an unlinked gap does not reveal it."""
        state = set_gap_word(state, 0, "swift")
        assert not gap_visible(state, 0)
        assert not gap_valid(state, 0)

    def test_arming_reveals_nothing(self, state):
        """Arming a category changes no visibility."""
        assert visible_slots(select_category(state, "rhyme")) == [0]


class TestProgressiveDisclosure:
    """Test cases for revealing the chain in order."""

    def test_gap_after_link(self, state):
        """Placing link 0 reveals gap 0 but not slot 1."""
        state = place(state, "synonym", 0)
        assert visible_gaps(state) == [0]
        assert visible_slots(state) == [0]

    def test_blank_gap_not_valid(self, state):
        """A linked but blank gap is not accepted."""
        state = place(state, "synonym", 0)
        state = set_gap_word(state, 0, "   ")
        assert not gap_valid(state, 0)
        assert not slot_visible(state, 1)

    def test_invalid_gap_blocks(self, state):
        """A rejected gap word keeps the next slot hidden."""
        state = place(state, "synonym", 0)
        state = set_gap_word(state, 0, "bird")
        assert not gap_valid(state, 0)
        assert visible_slots(state) == [0]

    def test_valid_gap_reveals_next_slot(self, state):
        """An accepted gap word reveals the next slot."""
        state = place(state, "synonym", 0)
        state = set_gap_word(state, 0, "swift")
        assert gap_valid(state, 0)
        assert visible_slots(state) == [0, 1]

    def test_full_chain(self, full_state):
        """A completed chain shows every slot and gap."""
        assert visible_slots(full_state) == [0, 1, 2]
        assert visible_gaps(full_state) == [0, 1]


class TestHiding:
    """Invalidating a gap hides everything after it."""

    def test_clearing_gap_hides_rest(self, full_state):
        """Clearing gap 0 hides slots 1 and 2 and gap 1."""
        state = set_gap_word(full_state, 0, "")
        assert visible_slots(state) == [0]
        assert visible_gaps(state) == [0]

    def test_hidden_gap_keeps_its_data(self, full_state):
        """Hidden slots and gaps keep their category and text."""
        state = set_gap_word(full_state, 0, "")
        assert state.slots[2].category == "rhyme"
        assert state.gaps[1].text == "jay"
        assert gap_valid(state, 1)
        assert not gap_visible(state, 1)

    def test_invalid_gap_hides_rest(self, full_state):
        """A gap that turns invalid hides the slots after it."""
        state = set_gap_word(full_state, 1, "crowd")
        assert visible_slots(state) == [0, 1]
        assert visible_gaps(state) == [0, 1]

    def test_erasing_link_hides_rest(self, full_state):
        """Erasing link 0 hides its gap and everything after it."""
        state = click_slot(full_state, 0)
        assert visible_slots(state) == [0]
        assert visible_gaps(state) == []

    def test_reveal_again(self, full_state):
        """Restoring the gap text restores the rest of the chain."""
        state = set_gap_word(full_state, 0, "")
        state = set_gap_word(state, 0, "swift")
        assert visible_slots(state) == [0, 1, 2]


class TestIndexChecks:
    """Visibility queries reject indices outside the chain."""

    def test_slot_out_of_range(self, state):
        with pytest.raises(ValueError):
            slot_visible(state, 3)

    def test_gap_out_of_range(self, state):
        with pytest.raises(ValueError):
            gap_visible(state, 2)
        with pytest.raises(ValueError):
            gap_valid(state, -1)
