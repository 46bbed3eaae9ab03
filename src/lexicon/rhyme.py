"""Approximate rhyme matching by spelling suffix."""

VOWELS = "aeiouy"


def rhyme_key(word: str) -> str:
    """
    Compute the rhyme key of a word.

    The key runs from the last vowel to the end of the word, so "quick" and
    "stick" both give "ick". A key shorter than two letters is widened to the
    last two letters ("day" -> "ay"), and a word with no vowel at all keys on
    its last three letters.

    This is a spelling heuristic, not a phonetic one: "though" and "tough"
    share a key, "two" and "shoe" do not.
    """
    lower = word.lower()

    last_vowel_idx = -1
    for i in range(len(lower) - 1, -1, -1):
        if lower[i] in VOWELS:
            last_vowel_idx = i
            break

    if last_vowel_idx == -1:
        return lower[-3:]

    ending = lower[last_vowel_idx:]
    return ending if len(ending) >= 2 else lower[-2:]


def rhymes_with(word: str, other: str) -> bool:
    """Check whether two words share a rhyme key (surrounding spaces ignored)."""
    return rhyme_key(word.strip()) == rhyme_key(other.strip())
