"""
Test suite for puzzle configuration and YAML loading.
"""

import pytest
from pydantic import ValidationError

from src.chain import CATEGORIES, Category, PuzzleConfig, default_puzzle, load_puzzle


class TestDefaultPuzzle:
    """Test cases for the built-in Daily 1 puzzle."""

    def test_values(self):
        """Daily 1 connects Fast to Day over three links."""
        puzzle = default_puzzle()
        assert puzzle.title == "Daily 1"
        assert (puzzle.start_word, puzzle.end_word) == ("Fast", "Day")
        assert puzzle.num_links == 3
        assert puzzle.num_gaps == 2
        assert [c.id for c in puzzle.categories] == ["synonym", "rhyme", "bird"]

    def test_lexicon(self):
        """The sample word lists are attached."""
        lexicon = default_puzzle().lexicon
        assert lexicon.is_bird("swift")
        assert lexicon.synonyms_of("fast") == ["swift", "quick", "rapid", "speedy", "brisk"]

    def test_get_category(self):
        """Categories are found by id."""
        assert default_puzzle().get_category("bird").label == "Type of Bird"


class TestPuzzleConfig:
    """Test cases for PuzzleConfig validation."""

    def test_needs_a_link(self):
        """A chain needs at least one link."""
        with pytest.raises(ValidationError):
            PuzzleConfig(start_word="Fast", end_word="Day", num_links=0)

    def test_needs_words(self):
        """Start and end words cannot be blank."""
        with pytest.raises(ValidationError):
            PuzzleConfig(start_word="", end_word="Day")

    def test_duplicate_categories(self):
        """Each category may be offered once."""
        with pytest.raises(ValidationError, match="Duplicate category"):
            PuzzleConfig(
                start_word="Fast",
                end_word="Day",
                categories=[CATEGORIES[0], CATEGORIES[0]],
            )

    def test_unknown_category_id(self):
        """Only the fixed category ids are allowed."""
        with pytest.raises(ValidationError):
            Category(id="antonym", label="Antonym")

    def test_immutable(self):
        """Start and end words never change once created."""
        puzzle = default_puzzle()
        with pytest.raises(ValidationError):
            puzzle.start_word = "Slow"


class TestLoadPuzzle:
    """Test cases for load_puzzle()."""

    def test_load(self, tmp_path):
        """A YAML puzzle is read into a PuzzleConfig."""
        path = tmp_path / "puzzle.yaml"
        path.write_text(
            "title: Daily 2\n"
            "start_word: Slow\n"
            "end_word: Crow\n"
            "num_links: 2\n"
            "lexicon:\n"
            "  synonyms:\n"
            "    Slow: [Sluggish, tardy]\n"
            "  bird_words: [Crow, rook]\n"
        )
        puzzle = load_puzzle(path)
        assert puzzle.title == "Daily 2"
        assert puzzle.num_gaps == 1
        assert puzzle.lexicon.synonyms == {"slow": ["sluggish", "tardy"]}
        assert puzzle.lexicon.bird_words == {"crow", "rook"}

    def test_defaults(self, tmp_path):
        """Missing keys fall back to the built-in categories and word lists."""
        path = tmp_path / "puzzle.yaml"
        path.write_text("start_word: Fast\nend_word: Day\n")
        puzzle = load_puzzle(str(path))
        assert puzzle.num_links == 3
        assert len(puzzle.categories) == 3
        assert puzzle.lexicon.is_bird("jay")

    def test_categories_from_file(self, tmp_path):
        """A puzzle can offer a subset of categories with its own labels."""
        path = tmp_path / "puzzle.yaml"
        path.write_text(
            "start_word: Fast\n"
            "end_word: Day\n"
            "categories:\n"
            "  - {id: rhyme, label: Rhymes with}\n"
        )
        puzzle = load_puzzle(path)
        assert [(c.id, c.label) for c in puzzle.categories] == [("rhyme", "Rhymes with")]

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_puzzle(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        """A file that is not a mapping is rejected."""
        path = tmp_path / "puzzle.yaml"
        path.write_text("- Fast\n- Day\n")
        with pytest.raises(ValueError, match="mapping"):
            load_puzzle(path)

    def test_malformed(self, tmp_path):
        """Bad values fail validation."""
        path = tmp_path / "puzzle.yaml"
        path.write_text("start_word: Fast\nend_word: Day\nnum_links: zero\n")
        with pytest.raises(ValidationError):
            load_puzzle(path)

    def test_unknown_key(self, tmp_path):
        """Misspelled keys are rejected instead of silently ignored."""
        path = tmp_path / "puzzle.yaml"
        path.write_text("start_word: Fast\nend_word: Day\nnum_link: 4\n")
        with pytest.raises(ValidationError):
            load_puzzle(path)

    def test_non_string_key(self, tmp_path):
        """A numeric top-level key fails validation rather than crashing."""
        path = tmp_path / "puzzle.yaml"
        path.write_text("start_word: Fast\nend_word: Day\n1: x\n")
        with pytest.raises(ValidationError):
            load_puzzle(path)
