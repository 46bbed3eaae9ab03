"""Chain engine for the Linkwise word-chain puzzle."""

from .models import (
    CategoryId,
    Category,
    CATEGORIES,
    LinkSlot,
    GapWord,
    PuzzleConfig,
    ChainState,
    SelectCategory,
    ClickSlot,
    SetGapWord,
    ChainAction,
)
from .engine import (
    ChainEngine,
    select_category,
    click_slot,
    set_gap_word,
    apply_action,
    judge_gap,
)
from .visibility import gap_valid, slot_visible, gap_visible, visible_slots, visible_gaps
from .view import CategoryView, SlotView, GapView, ChainView, build_view, render_view
from .puzzle import default_puzzle, load_puzzle

__all__ = [
    # Models
    "CategoryId",
    "Category",
    "CATEGORIES",
    "LinkSlot",
    "GapWord",
    "PuzzleConfig",
    "ChainState",
    # Actions
    "SelectCategory",
    "ClickSlot",
    "SetGapWord",
    "ChainAction",
    # Transitions
    "ChainEngine",
    "select_category",
    "click_slot",
    "set_gap_word",
    "apply_action",
    "judge_gap",
    # Visibility
    "gap_valid",
    "slot_visible",
    "gap_visible",
    "visible_slots",
    "visible_gaps",
    # Read model
    "CategoryView",
    "SlotView",
    "GapView",
    "ChainView",
    "build_view",
    "render_view",
    # Puzzles
    "default_puzzle",
    "load_puzzle",
]
