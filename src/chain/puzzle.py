"""Puzzle instances: the built-in daily puzzle and YAML puzzle files."""

import logging
from pathlib import Path
from typing import Union

import yaml

from .models import PuzzleConfig, CATEGORIES
from ..lexicon.data import default_lexicon

logger = logging.getLogger(__name__)


def default_puzzle() -> PuzzleConfig:
    """The "Daily 1" puzzle: Fast to Day over three links."""
    return PuzzleConfig(
        title="Daily 1",
        start_word="Fast",
        end_word="Day",
        num_links=3,
        categories=list(CATEGORIES),
        lexicon=default_lexicon(),
    )


def load_puzzle(puzzle_path: Union[str, Path]) -> PuzzleConfig:
    """
    Load a puzzle from a YAML file.

    Keys missing from the file fall back to the built-in puzzle's
    categories and sample word lists.

    Example puzzle.yaml:
        title: Daily 1
        start_word: Fast
        end_word: Day
        num_links: 3
        lexicon:
          synonyms:
            fast: [swift, quick]
          bird_words: [swift, jay]

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a YAML mapping
        pydantic.ValidationError: If the puzzle is malformed
    """
    path = Path(puzzle_path)

    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {puzzle_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Puzzle file must contain a mapping: {puzzle_path}")

    puzzle = PuzzleConfig.model_validate(data)
    logger.info("Loaded puzzle '%s' from %s", puzzle.title, path)
    return puzzle
