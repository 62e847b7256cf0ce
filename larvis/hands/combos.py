import re
from dataclasses import dataclass
from enum import Enum

from larvis.hands.cards import RANK_NAMES, card_rank, sanitize_hand

# Combo types ranked ordinally
HIGH_CARDS, ONE_PAIR, TWO_PAIRS, TRIPLE, FULL_HOUSE, FOUR_KIND = range(6)

COMBO_NAMES = {
    HIGH_CARDS: "High Cards",
    ONE_PAIR: "One Pair",
    TWO_PAIRS: "Two Pairs",
    TRIPLE: "Triple",
    FULL_HOUSE: "Full House",
    FOUR_KIND: "Four of a Kind",
}

# One or more repeating cards. Assumes the hand is sanitized.
COMPONENT_RE = re.compile("|".join(f"{name}+" for name in RANK_NAMES))


class Result(str, Enum):
    """Outcome of comparing two hands."""

    TIE = "Tie"
    HAND1_WINS = "Hand 1"
    HAND2_WINS = "Hand 2"

    def __str__(self) -> str:
        return self.value


@dataclass
class Combo:
    type: int
    cards: str  # sanitized hand
    components: list[str]
    key: tuple  # (length, rank) per component, used for comparing within same type

    @property
    def name(self) -> str:
        return COMBO_NAMES[self.type]

    def __str__(self) -> str:
        return f"{self.name} {' '.join(self.components)}"


def sorted_components(hand: str) -> list[str]:
    """
    Split a hand into its components, strongest first.

    Each component is either a run of identical cards or a single card.
    Components are sorted descendingly, first by length and then by card rank
    when lengths are equal.
    Examples: ["AA", "44", "6"] or ["222", "AA"] or ["A", "Q", "T", "4", "2"]
    """
    components = COMPONENT_RE.findall(sanitize_hand(hand))
    return sorted(components, key=lambda c: (len(c), card_rank(c[0])), reverse=True)


def combo_type(hand: str) -> int:
    counts = {4: 0, 3: 0, 2: 0, 1: 0}
    for component in sorted_components(hand):
        counts[len(component)] = counts.get(len(component), 0) + 1

    if counts[4] == 1:
        return FOUR_KIND
    if counts[3] == 1 and counts[2] == 1:
        return FULL_HOUSE
    if counts[3] == 1:
        return TRIPLE
    if counts[2] == 2:
        return TWO_PAIRS
    if counts[2] == 1:
        return ONE_PAIR
    return HIGH_CARDS


def hand_to_combo(hand: str) -> Combo:
    # Convert a hand string to the Combo it represents
    components = sorted_components(hand)
    key = tuple((len(c), card_rank(c[0])) for c in components)
    return Combo(combo_type(hand), sanitize_hand(hand), components, key)


def compare_combos(a: Combo, b: Combo) -> int:
    if a.type != b.type:
        return 1 if a.type > b.type else -1

    # Longer components win first, then the first differing rank decides
    if a.key == b.key:
        return 0
    return 1 if a.key > b.key else -1


def calculate_result(hand1: str, hand2: str) -> Result:
    """Return which of two valid hands wins, or a tie."""
    cmp = compare_combos(hand_to_combo(hand1), hand_to_combo(hand2))
    if cmp > 0:
        return Result.HAND1_WINS
    if cmp < 0:
        return Result.HAND2_WINS
    return Result.TIE
