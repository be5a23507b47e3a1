"""
cribbage_client.types — TypedDict schemas for server payloads
==============================================================

Documents the exact JSON the client sends to the game server and the
error body it reads back. Snapshot responses are parsed by the pydantic
models in cribbage_client._game.snapshot instead.

Use __annotations__ to inspect fields:

    >>> ActionEnvelope.__annotations__
    {'gameID': str, 'playerID': str, 'overcomes': int, 'action': ...}
"""

from typing import List, Optional, TypedDict, Union


# ============================================
# Cards
# ============================================

class WireCard(TypedDict):
    """A card as sent to the server."""
    rank: int       # 1 (Ace) .. 13 (King)
    suit: str       # "Spade" | "Heart" | "Diamond" | "Clubs"
    name: str       # e.g. "5H", "10S"


# ============================================
# POST /create/action
# ============================================

class DealPayload(TypedDict):
    """Deal. num_shuffles is the cosmetic shuffle count."""
    num_shuffles: int


class BuildCribPayload(TypedDict):
    """Discard cards to the crib."""
    cards: List[WireCard]


class CutPayload(TypedDict):
    """Cut the deck. percentage is in [0, 1]."""
    percentage: float


class PegPayload(TypedDict):
    """Peg one card, or say go when card is None."""
    card: Optional[WireCard]
    say_go: bool


ActionPayload = Union[DealPayload, BuildCribPayload, CutPayload, PegPayload]


class ActionEnvelope(TypedDict):
    """Body of POST /create/action.

    Fields
    ------
    gameID : str
        Game the action applies to.
    playerID : str
        Acting player.
    overcomes : int
        Blocker code the action resolves: 0 deal, 1 crib, 2 cut, 3 peg.
    action : ActionPayload
        Action-specific payload.
    """
    gameID: str
    playerID: str
    overcomes: int
    action: ActionPayload


# ============================================
# Errors
# ============================================

class ErrorBody(TypedDict, total=False):
    """Error body returned by the server with a 4xx/5xx status."""
    message: str
