"""
Main entry point for playing a Linkwise chain.

Usage:
    python -m src.main
    python -m src.main puzzle.yaml --script actions.yaml --json --verbose
"""

import argparse
import json
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml
from pydantic import TypeAdapter

from .chain import (
    ChainAction,
    ChainEngine,
    ClickSlot,
    SelectCategory,
    SetGapWord,
    default_puzzle,
    load_puzzle,
    render_view,
)

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  select <category>   arm a category (again to disarm), e.g. select synonym
  click <n>           place the armed category on link n, or clear link n
  type <n> <word...>  set the text of gap n (no word clears it)
  show                print the chain
  help                print this help
  quit                leave"""


def load_script(script_path: str) -> List[ChainAction]:
    """Load a list of actions from a YAML file."""
    path = Path(script_path)

    if not path.exists():
        raise FileNotFoundError(f"Script file not found: {script_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return TypeAdapter(List[ChainAction]).validate_python(data or [])


def parse_command(line: str) -> Optional[ChainAction]:
    """
    Parse one interactive command into an action.

    Slot and gap numbers are 1-based, as shown on screen.

    Returns:
        The action, or None for a blank line

    Raises:
        ValueError: If the command is malformed
    """
    parts = shlex.split(line)
    if not parts:
        return None

    command, args = parts[0].lower(), parts[1:]
    if command == "select" and len(args) == 1:
        return SelectCategory(category=args[0].lower())
    if command == "click" and len(args) == 1:
        return ClickSlot(slot=_position(args[0]))
    if command == "type" and args:
        return SetGapWord(gap=_position(args[0]), text=" ".join(args[1:]))
    raise ValueError(f"Unrecognized command: {line.strip()} (try 'help')")


def _position(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"Expected a number, got '{value}'") from None
    if number < 1:
        raise ValueError(f"Positions start at 1, got {number}")
    return number - 1


def show(engine: ChainEngine, as_json: bool, out: TextIO) -> None:
    view = engine.view()
    if as_json:
        print(json.dumps(view.model_dump(), indent=2), file=out)
    else:
        print(render_view(view), file=out)


def run_interactive(
    engine: ChainEngine,
    as_json: bool = False,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Read commands until 'quit' or end of input, showing the chain after each."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(HELP_TEXT, file=out)
    print(file=out)
    show(engine, as_json, out)

    for line in stdin:
        stripped = line.strip().lower()
        if stripped in ("quit", "exit"):
            break
        if stripped == "help":
            print(HELP_TEXT, file=out)
            continue
        if stripped == "show":
            show(engine, as_json, out)
            continue

        try:
            action = parse_command(line)
            if action is None:
                continue
            engine.apply(action)
        except ValueError as e:
            print(f"Error: {e}", file=out)
            continue

        print(file=out)
        show(engine, as_json, out)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play a Linkwise word chain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example actions.yaml:
  - {kind: select_category, category: synonym}
  - {kind: click_slot, slot: 0}
  - {kind: set_gap_word, gap: 0, text: swift}
  - {kind: select_category, category: bird}
  - {kind: click_slot, slot: 1}
  - {kind: set_gap_word, gap: 1, text: jay}
        """
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Path to YAML puzzle file (default: the built-in Daily 1)"
    )
    parser.add_argument(
        "--script", "-s",
        help="Replay actions from a YAML file instead of reading commands"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the chain as JSON instead of text"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every transition"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        puzzle = load_puzzle(args.puzzle) if args.puzzle else default_puzzle()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading puzzle: {e}", file=sys.stderr)
        return 1

    engine = ChainEngine(puzzle)

    if not args.script:
        return run_interactive(engine, as_json=args.json)

    try:
        actions = load_script(args.script)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading script: {e}", file=sys.stderr)
        return 1

    logger.info("Replaying %d actions from %s", len(actions), args.script)
    for i, action in enumerate(actions, start=1):
        try:
            engine.apply(action)
        except ValueError as e:
            print(f"Error in action {i}: {e}", file=sys.stderr)
            return 1

    show(engine, args.json, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
