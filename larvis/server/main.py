"""Larvis hand comparator - FastAPI application."""

from typing import Annotated

from fastapi import FastAPI, HTTPException, Path, status

from larvis.hands.cards import describe_hand_errors, validate_hand
from larvis.hands.combos import calculate_result, hand_to_combo
from larvis.server.models import (
    ComboName,
    CompareRequest,
    CompareResponse,
    ErrorResponse,
    HandResponse,
)

app = FastAPI(
    title="Larvis Hand Comparator",
    description="HTTP API comparing two five-card poker hands",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)


def evaluate_hand(hand: str) -> HandResponse:
    """Convert a valid hand into its API representation."""
    combo = hand_to_combo(hand)
    return HandResponse(
        hand=hand,
        cards=combo.cards,
        combo=ComboName(combo.name),
        components=combo.components,
    )


@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Larvis Hand Comparator"}


@app.get(
    "/api/hand/{hand}",
    response_model=HandResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Hand evaluated"},
        400: {"model": ErrorResponse, "description": "Invalid hand"},
    },
    tags=["Hands"],
)
async def get_hand(
    hand: Annotated[str, Path(description="Hand to evaluate, e.g. 7A777")],
) -> HandResponse:
    """Classify a single hand and list its components."""
    err = validate_hand(hand)
    if err is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))
    return evaluate_hand(hand)


@app.post(
    "/api/compare",
    response_model=CompareResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Hands compared"},
        400: {"model": ErrorResponse, "description": "One or both hands are invalid"},
    },
    tags=["Hands"],
)
async def compare_hands(request: CompareRequest) -> CompareResponse:
    """
    Compare two hands.

    Both hands are validated before comparing; every problem is reported in
    the error detail, one line per invalid hand.
    """
    problems = describe_hand_errors([request.hand1, request.hand2])
    if problems:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="\n".join(problems))

    result = calculate_result(request.hand1, request.hand2)
    return CompareResponse(
        result=result,
        hand1=evaluate_hand(request.hand1),
        hand2=evaluate_hand(request.hand2),
    )
