"""Pydantic models for the hand comparison API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from larvis.hands.combos import Result


class ComboName(str, Enum):
    """Hand combination categories, weakest first."""

    HIGH_CARDS = "High Cards"
    ONE_PAIR = "One Pair"
    TWO_PAIRS = "Two Pairs"
    TRIPLE = "Triple"
    FULL_HOUSE = "Full House"
    FOUR_KIND = "Four of a Kind"


class HandResponse(BaseModel):
    """Evaluation of a single hand."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "hand": "7a777",
                    "cards": "A7777",
                    "combo": "Four of a Kind",
                    "components": ["7777", "A"],
                }
            ]
        }
    )

    hand: str = Field(..., description="Hand as submitted")
    cards: str = Field(..., description="Uppercased hand sorted from stronger to weaker cards")
    combo: ComboName = Field(..., description="Combination category")
    components: list[str] = Field(..., description="Groups of identical cards, strongest first")


class CompareRequest(BaseModel):
    """Request to compare two hands."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"hand1": "AAAQQ", "hand2": "QQQAA"}]})

    hand1: str = Field(..., description="First hand, five ranks out of 23456789TJQKA")
    hand2: str = Field(..., description="Second hand, five ranks out of 23456789TJQKA")


class CompareResponse(BaseModel):
    """Response to a hand comparison."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "result": "Hand 1",
                    "hand1": {
                        "hand": "AAAQQ",
                        "cards": "AAAQQ",
                        "combo": "Full House",
                        "components": ["AAA", "QQ"],
                    },
                    "hand2": {
                        "hand": "QQQAA",
                        "cards": "AAQQQ",
                        "combo": "Full House",
                        "components": ["QQQ", "AA"],
                    },
                }
            ]
        }
    )

    result: Result = Field(..., description="Winning hand, or Tie")
    hand1: HandResponse = Field(..., description="Evaluation of the first hand")
    hand2: HandResponse = Field(..., description="Evaluation of the second hand")


class ErrorResponse(BaseModel):
    """Generic error response."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"detail": "poker hand must have 5 cards"}]})

    detail: str = Field(..., description="Error message")
