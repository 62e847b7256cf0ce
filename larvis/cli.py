#!/usr/bin/env python3
"""
Command line entry point: compare two poker hands and print the winner.
"""

import argparse
import sys

from larvis.hands.cards import describe_hand_errors
from larvis.hands.combos import calculate_result


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="larvis",
        usage="larvis FIRST_HAND SECOND_HAND",
        description="Compare two five-card poker hands, e.g. larvis AAKQ2 T9872",
    )
    parser.add_argument(
        "hands",
        nargs="*",
        metavar="HAND",
        help="Five rank symbols out of 23456789TJQKA (case-insensitive, spaces ignored)",
    )
    return parser


def _exit_with_error(parser: argparse.ArgumentParser, message: str) -> int:
    # Print the error and command usage, return the failure exit code
    print()
    print(message)
    print()
    parser.print_usage(sys.stdout)
    print()
    return 1


def validate_arguments(hands: list[str]) -> str | None:
    """Return an error message unless exactly 2 poker hands are given."""
    if len(hands) < 2:
        return f"urg, {len(hands)} poker hand was given. Please input 2 poker hands"
    if len(hands) > 2:
        return f"woaa, you input {len(hands)} hands! I can only work with 2"
    return None


def hands_error(hands: list[str]) -> str | None:
    """Validate every hand and combine the problems into one message."""
    problems = describe_hand_errors(hands)
    if not problems:
        return None
    return "oops, looks like there are issues with your poker hands:\n" + "\n".join(problems)


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    if argv[:1] in (["-h"], ["--help"]):
        parser.parse_args(argv)
    # Every argument is a hand, even one starting with "-"
    args = parser.parse_args(["--", *argv])
    hands = args.hands

    message = validate_arguments(hands) or hands_error(hands)
    if message is not None:
        return _exit_with_error(parser, message)

    print(calculate_result(hands[0], hands[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
