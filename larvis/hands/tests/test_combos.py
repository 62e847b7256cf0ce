import pytest

from larvis.hands.combos import (
    FOUR_KIND,
    FULL_HOUSE,
    HIGH_CARDS,
    ONE_PAIR,
    TRIPLE,
    TWO_PAIRS,
    Combo,
    Result,
    calculate_result,
    combo_type,
    compare_combos,
    hand_to_combo,
    sorted_components,
)


class TestSortedComponents:
    """Tests for sorted_components"""

    @pytest.mark.parametrize(
        "hand,expected",
        [
            ("7TAJ2", ["A", "J", "T", "7", "2"]),
            ("24AA7", ["AA", "7", "4", "2"]),
            ("88AA7", ["AA", "88", "7"]),
            ("777AA", ["777", "AA"]),
            ("7TA77", ["777", "A", "T"]),
            ("7A777", ["7777", "A"]),
            ("qq 2q2", ["QQQ", "22"]),
        ],
    )
    def test_components(self, hand, expected):
        assert sorted_components(hand) == expected

    def test_total_length(self):
        for hand in ["7TAJ2", "24AA7", "88AA7", "777AA", "7A777"]:
            assert sum(len(c) for c in sorted_components(hand)) == 5


class TestComboType:
    """Tests for combo_type"""

    @pytest.mark.parametrize(
        "hand,expected",
        [
            ("7A777", FOUR_KIND),
            ("777AA", FULL_HOUSE),
            ("7TA77", TRIPLE),
            ("88AA7", TWO_PAIRS),
            ("24AA7", ONE_PAIR),
            ("7TAJ2", HIGH_CARDS),
        ],
    )
    def test_combo_type(self, hand, expected):
        assert combo_type(hand) == expected

    def test_type_order(self):
        assert HIGH_CARDS < ONE_PAIR < TWO_PAIRS < TRIPLE < FULL_HOUSE < FOUR_KIND


class TestHandToCombo:
    """Tests for hand_to_combo"""

    def test_full_house(self):
        combo = hand_to_combo("qqAaa")
        assert combo.type == FULL_HOUSE
        assert combo.cards == "AAAQQ"
        assert combo.components == ["AAA", "QQ"]
        assert combo.key == ((3, 12), (2, 10))
        assert combo.name == "Full House"
        assert str(combo) == "Full House AAA QQ"

    def test_high_cards(self):
        combo = hand_to_combo("2345 7")
        assert combo.type == HIGH_CARDS
        assert combo.key == ((1, 5), (1, 3), (1, 2), (1, 1), (1, 0))


class TestCompareCombos:
    """Tests for compare_combos"""

    def test_different_types(self):
        pair = hand_to_combo("22456")
        high = hand_to_combo("AKQJT")
        assert compare_combos(pair, high) > 0
        assert compare_combos(high, pair) < 0

    def test_same_type(self):
        a = Combo(ONE_PAIR, "99752", ["99", "7", "5", "2"], ((2, 7), (1, 5), (1, 3), (1, 0)))
        b = Combo(ONE_PAIR, "99742", ["99", "7", "4", "2"], ((2, 7), (1, 5), (1, 2), (1, 0)))
        assert compare_combos(a, b) > 0
        assert compare_combos(b, a) < 0
        assert compare_combos(a, a) == 0

    def test_longer_component_wins_within_type(self):
        # Duplicate cards are never rejected, so five of a kind is a valid high-card hand
        five = hand_to_combo("AAAAA")
        high = hand_to_combo("AKQJT")
        assert five.type == high.type == HIGH_CARDS
        assert five.key == ((5, 12),)
        assert compare_combos(five, high) > 0
        assert compare_combos(high, five) < 0


HAND1_WINS = [
    ("AAAQQ", "QQQAA"),
    ("Q53Q4", "53QQ2"),
    ("53888", "88375"),
    ("33337", "QQAAA"),
    ("22333", "AAA58"),
    ("33389", "AAKK4"),
    ("44223", "AA892"),
    ("22456", "AKQJT"),
    ("99977", "77799"),
    ("99922", "88866"),
    ("9922A", "9922K"),
    ("99975", "99965"),
    ("99975", "99974"),
    ("99752", "99652"),
    ("99752", "99742"),
    ("99753", "99752"),
    ("88822", "QQ777"),
    ("99662", "88776"),
    ("AAAAA", "AKQJT"),
    ("22222", "AKQJ9"),
]

TIES = [
    ("AAQaQ", "QQAAA"),
    ("3Q5q2", "5q3Q2"),
    ("AAAQQ", "QQAAA"),
    ("53QQ2", "Q53Q2"),
    ("53888", "88385"),
]


class TestCalculateResult:
    """Tests for calculate_result"""

    @pytest.mark.parametrize("hand1,hand2", HAND1_WINS)
    def test_hand1_wins(self, hand1, hand2):
        assert calculate_result(hand1, hand2) == Result.HAND1_WINS

    @pytest.mark.parametrize("hand1,hand2", HAND1_WINS)
    def test_hand2_wins(self, hand1, hand2):
        assert calculate_result(hand2, hand1) == Result.HAND2_WINS

    @pytest.mark.parametrize("hand1,hand2", TIES)
    def test_tie(self, hand1, hand2):
        assert calculate_result(hand1, hand2) == Result.TIE
        assert calculate_result(hand2, hand1) == Result.TIE

    @pytest.mark.parametrize("hand", ["7TaQK", "77777", "AAKKQ", "23456"])
    def test_hand_ties_with_itself(self, hand):
        assert calculate_result(hand, hand) == Result.TIE

    def test_result_strings(self):
        assert str(Result.TIE) == "Tie"
        assert str(Result.HAND1_WINS) == "Hand 1"
        assert str(Result.HAND2_WINS) == "Hand 2"
