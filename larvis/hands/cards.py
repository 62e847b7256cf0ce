import re

CARDS_PER_HAND = 5

RANK_NAMES = ["2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A"]  # weakest to strongest

INVALID_CARD_RE = re.compile(r"[^2-9TJQKA]")


class HandError(ValueError):
    """Base class for problems found in a raw poker hand."""


class WrongCardCount(HandError):
    def __init__(self) -> None:
        super().__init__(f"poker hand must have {CARDS_PER_HAND} cards")


class InvalidCard(HandError):
    def __init__(self, card: str) -> None:
        self.card = card
        super().__init__(f'"{card}" is not a valid card')


class InvalidCards(HandError):
    def __init__(self, cards: list[str]) -> None:
        self.cards = cards
        super().__init__(f'"{", ".join(cards)}" are not valid cards')


# Card utils


def card_rank(card: str) -> int:
    # Unknown symbols rank below every valid card
    if card in RANK_NAMES:
        return RANK_NAMES.index(card)
    return -1


def sanitize_hand(hand: str) -> str:
    """Return the hand uppercased, without whitespace, sorted from stronger to weaker cards."""
    cards = list("".join(hand.upper().split()))
    return "".join(sorted(cards, key=card_rank, reverse=True))


def validate_hand(hand: str) -> HandError | None:
    """
    Check a raw hand string.

    Returns the error describing what is wrong with the hand, or None if the
    hand is valid. The card count is checked first; invalid symbols are only
    reported for hands of the right length.
    """
    hand = sanitize_hand(hand)

    if len(hand) != CARDS_PER_HAND:
        return WrongCardCount()

    invalid_cards = INVALID_CARD_RE.findall(hand)
    if not invalid_cards:
        return None

    unique_invalid_cards = sorted(set(invalid_cards))
    if len(unique_invalid_cards) == 1:
        return InvalidCard(invalid_cards[0])

    return InvalidCards(unique_invalid_cards)


def describe_hand_errors(hands: list[str]) -> list[str]:
    # One "- <hand>: <problem>" line per invalid hand, in input order
    problems = []
    for hand in hands:
        err = validate_hand(hand)
        if err is not None:
            problems.append(f"- {hand}: {err}")
    return problems
