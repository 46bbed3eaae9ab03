"""
Read model of the chain for a presentation layer.

build_view() flattens a ChainState plus its derived visibility into plain
records; render_view() draws the visible part of the chain as text.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from .models import ChainState
from .visibility import gap_valid, gap_visible, slot_visible


SlotStatus = Literal["Linked", "Ready", "Empty"]


class CategoryView(BaseModel):
    """A category button."""
    id: str
    label: str
    placed: bool = False  # Assigned to some slot
    active: bool = False  # Currently armed


class SlotView(BaseModel):
    """A link slot as shown on screen."""
    index: int
    category: Optional[str] = None
    label: Optional[str] = None
    error: Optional[str] = None
    visible: bool = False
    status: SlotStatus = "Empty"


class GapView(BaseModel):
    """A gap input as shown on screen."""
    index: int
    text: str = ""
    error: Optional[str] = None
    visible: bool = False
    accepted: bool = False


class ChainView(BaseModel):
    """Everything a presentation layer needs to draw the chain."""
    title: str
    start_word: str
    end_word: str
    selection: Optional[str] = None
    categories: List[CategoryView] = Field(default_factory=list)
    slots: List[SlotView] = Field(default_factory=list)
    gaps: List[GapView] = Field(default_factory=list)


def build_view(state: ChainState) -> ChainView:
    """Build the read model for `state`."""
    puzzle = state.puzzle
    labels = {c.id: c.label for c in puzzle.categories}

    categories = [
        CategoryView(
            id=c.id,
            label=c.label,
            placed=state.slot_holding(c.id) is not None,
            active=c.id == state.selection,
        )
        for c in puzzle.categories
    ]

    slots = []
    for slot in state.slots:
        if slot.category is not None:
            status = "Linked"
        elif state.selection is not None:
            status = "Ready"
        else:
            status = "Empty"
        slots.append(SlotView(
            index=slot.index,
            category=slot.category,
            label=labels.get(slot.category) if slot.category else None,
            error=slot.error.message if slot.error else None,
            visible=slot_visible(state, slot.index),
            status=status,
        ))

    gaps = [
        GapView(
            index=gap.index,
            text=gap.text,
            error=gap.error.message if gap.error else None,
            visible=gap_visible(state, gap.index),
            accepted=gap_valid(state, gap.index),
        )
        for gap in state.gaps
    ]

    return ChainView(
        title=puzzle.title,
        start_word=puzzle.start_word,
        end_word=puzzle.end_word,
        selection=state.selection,
        categories=categories,
        slots=slots,
        gaps=gaps,
    )


def render_view(view: ChainView) -> str:
    """
    Render the visible part of the chain as text.

    Slots and gaps are numbered from 1, as the player addresses them.

    Example:
        Daily 1
        Categories: [Synonym (placed)] [Rhyme (active)] [Type of Bird]

          Start word   Fast (given)
          Link 1       Synonym
          Gap word     swift  (Accepted)
          Link 2       (empty, ready)
          End word     Day (given)
    """
    lines = [view.title]

    buttons = []
    for c in view.categories:
        badges = [b for b, on in (("placed", c.placed), ("active", c.active)) if on]
        suffix = f" ({', '.join(badges)})" if badges else ""
        buttons.append(f"[{c.label}{suffix}]")
    lines.append("Categories: " + " ".join(buttons))
    lines.append("")

    lines.append(f"  {'Start word':<12} {view.start_word} (given)")
    for slot in view.slots:
        if not slot.visible:
            break
        if slot.label:
            shown = slot.label
        elif slot.status == "Ready":
            shown = "(empty, ready)"
        else:
            shown = "(empty)"
        lines.append(f"  {f'Link {slot.index + 1}':<12} {shown}")
        if slot.error:
            lines.append(f"  {'':<12} ! {slot.error}")

        if slot.index >= len(view.gaps):
            continue
        gap = view.gaps[slot.index]
        if not gap.visible:
            break
        text = gap.text if gap.text else "_____"
        if gap.error:
            lines.append(f"  {'Gap word':<12} {text}  ! {gap.error}")
        elif gap.accepted:
            lines.append(f"  {'Gap word':<12} {text}  (Accepted)")
        else:
            lines.append(f"  {'Gap word':<12} {text}")
    lines.append(f"  {'End word':<12} {view.end_word} (given)")

    return "\n".join(lines)
