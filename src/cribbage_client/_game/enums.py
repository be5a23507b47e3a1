# Area: Game
"""
cribbage_client._game.enums — Phase, action and card enums
===========================================================

Defines the phases of a cribbage match, the kinds of player action
the client can prepare, and the suits of a card.

Phase order (server-driven, the client never advances it):
Deal -> Cut -> BuildCrib -> Peg -> Score -> Complete
Score may loop back to Deal for a new round.
"""

from enum import Enum
from typing import Any, Optional


class Phase(Enum):
    """Phase of a cribbage match, as reported by the server."""
    DEAL = "Deal"
    CUT = "Cut"
    BUILD_CRIB = "BuildCrib"
    PEG = "Peg"
    SCORE = "Score"
    COMPLETE = "Complete"


class ActionKind(Enum):
    """Kinds of action a player can prepare locally."""
    SHUFFLE = "Shuffle"
    SELECT_CARD = "SelectCard"
    DEAL = "Deal"
    BUILD_CRIB = "BuildCrib"
    CUT = "Cut"
    PEG = "Peg"


class Suit(Enum):
    SPADE = "Spade"
    HEART = "Heart"
    DIAMOND = "Diamond"
    CLUBS = "Clubs"

    @property
    def letter(self) -> str:
        return self.value[0]


class Blocker(Enum):
    """What the server is waiting on a player for. Sent as `overcomes`."""
    DEAL_CARDS = 0
    CRIB_CARD = 1
    CUT_CARD = 2
    PEG_CARD = 3
    COUNT_HAND = 4
    COUNT_CRIB = 5


# Server integer codes for phases. Counting and crib counting are both
# read-only scoring as far as the client is concerned.
SERVER_PHASE_CODES = {
    0: Phase.DEAL,
    1: Phase.BUILD_CRIB,
    2: Phase.CUT,
    3: Phase.PEG,
    4: Phase.SCORE,
    5: Phase.SCORE,
    6: Phase.COMPLETE,
}

_PHASE_ALIASES = {
    "buildcrib": Phase.BUILD_CRIB,
    "pegging": Phase.PEG,
    "counting": Phase.SCORE,
    "cribcounting": Phase.SCORE,
    "done": Phase.COMPLETE,
}

# Server integer codes for suits
SERVER_SUIT_CODES = {
    0: Suit.SPADE,
    1: Suit.CLUBS,
    2: Suit.DIAMOND,
    3: Suit.HEART,
}

_SUIT_ALIASES = {
    "s": Suit.SPADE, "spade": Suit.SPADE, "spades": Suit.SPADE,
    "♠": Suit.SPADE, "♤": Suit.SPADE,
    "h": Suit.HEART, "heart": Suit.HEART, "hearts": Suit.HEART,
    "♥": Suit.HEART, "♡": Suit.HEART,
    "d": Suit.DIAMOND, "diamond": Suit.DIAMOND, "diamonds": Suit.DIAMOND,
    "♦": Suit.DIAMOND, "♢": Suit.DIAMOND,
    "c": Suit.CLUBS, "club": Suit.CLUBS, "clubs": Suit.CLUBS,
    "♣": Suit.CLUBS, "♧": Suit.CLUBS,
}


def parse_phase(value: Any) -> Phase:
    """
    Parse a phase from its name or the server's integer code.

    Raises:
        ValueError: If the value does not name a phase
    """
    if isinstance(value, Phase):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value in SERVER_PHASE_CODES:
            return SERVER_PHASE_CODES[value]
        raise ValueError(f"Unknown phase code: {value}")
    if isinstance(value, str):
        for phase in Phase:
            if value == phase.value or value.upper() == phase.name:
                return phase
        alias = _PHASE_ALIASES.get(value.lower())
        if alias is not None:
            return alias
    raise ValueError(f"Unknown phase: {value!r}")


def parse_suit(value: Any) -> Optional[Suit]:
    """Parse a suit from a name, letter, symbol or server code. None if unknown."""
    if isinstance(value, Suit):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return SERVER_SUIT_CODES.get(value)
    if isinstance(value, str):
        # strip variation selectors that follow some suit symbols
        key = value.replace("\ufe0e", "").replace("\ufe0f", "").strip().lower()
        return _SUIT_ALIASES.get(key)
    return None
