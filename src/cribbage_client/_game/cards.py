# Area: Game
"""
cribbage_client._game.cards — Playing cards
============================================

A card is identified by (rank, suit). Ace is 1, King is 13.

Opponent cards that have not been revealed to this client arrive as
face-down placeholders and are represented by UNKNOWN_CARD. It is
falsy, never equal to any card (itself included), and cannot be
selected.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union

from .enums import Suit, parse_suit

_RANK_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}
_NAME_RANKS = {"A": 1, "J": 11, "Q": 12, "K": 13}

UNKNOWN_NAME = "unknown"


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self):
        if not 1 <= self.rank <= 13:
            raise ValueError(f"Invalid rank: {self.rank}")

    @property
    def name(self) -> str:
        """Short display name, e.g. 5H, 10S, KC."""
        return f"{_RANK_NAMES.get(self.rank, str(self.rank))}{self.suit.letter}"

    @property
    def selectable(self) -> bool:
        return True

    @property
    def is_red(self) -> bool:
        return self.suit in (Suit.HEART, Suit.DIAMOND)

    def to_wire(self) -> Dict[str, Any]:
        return {"rank": self.rank, "suit": self.suit.value, "name": self.name}

    def __str__(self) -> str:
        return self.name


class _UnknownCard:
    """Face-down card whose identity is hidden from this client."""

    name = UNKNOWN_NAME
    rank = None
    suit = None
    selectable = False
    is_red = False

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return hash(UNKNOWN_NAME)

    def to_wire(self) -> Dict[str, Any]:
        return {"name": UNKNOWN_NAME}

    def __repr__(self) -> str:
        return "UNKNOWN_CARD"

    def __str__(self) -> str:
        return UNKNOWN_NAME


UNKNOWN_CARD = _UnknownCard()

AnyCard = Union[Card, _UnknownCard]


def is_unknown(card: Any) -> bool:
    return card is UNKNOWN_CARD


def card_from_string(text: str) -> AnyCard:
    """
    Parse a card name such as "5h", "10S", "K♠" or "unknown".

    Raises:
        ValueError: If the text does not name a card
    """
    cleaned = text.replace("\ufe0e", "").replace("\ufe0f", "").strip()
    if not cleaned or cleaned.lower() == UNKNOWN_NAME:
        return UNKNOWN_CARD
    if len(cleaned) < 2:
        raise ValueError(f"bad input card: {text}")

    rank_part, suit_part = cleaned[:-1], cleaned[-1]
    suit = parse_suit(suit_part)
    if suit is None:
        raise ValueError(f"bad input card: {text}")

    rank_upper = rank_part.upper()
    if rank_upper in _NAME_RANKS:
        rank = _NAME_RANKS[rank_upper]
    else:
        try:
            rank = int(rank_part)
        except ValueError:
            raise ValueError(f"bad input card: {text}") from None
    return Card(rank=rank, suit=suit)


def card_from_wire(value: Any) -> AnyCard:
    """
    Parse a card from any wire representation the server emits.

    Accepts a Card, a name string, or a dict with rank/value and suit
    keys (suit by name or server code). A dict carrying only
    {"name": "unknown"}, a zero rank, an empty dict or None is a
    face-down card.

    Raises:
        ValueError: If the value cannot be read as a card
    """
    if isinstance(value, Card) or value is UNKNOWN_CARD:
        return value
    if value is None:
        return UNKNOWN_CARD
    if isinstance(value, str):
        return card_from_string(value)
    if isinstance(value, dict):
        if not value:
            return UNKNOWN_CARD
        rank = _first(value, "rank", "value", "Rank", "Value")
        suit_raw = _first(value, "suit", "Suit")
        if rank is None or suit_raw is None:
            name = value.get("name")
            if isinstance(name, str):
                return card_from_string(name)
            raise ValueError(f"bad input card: {value}")
        # the server zero-values cards it has not revealed
        if rank == 0:
            return UNKNOWN_CARD
        suit = parse_suit(suit_raw)
        if suit is None:
            raise ValueError(f"bad input suit: {suit_raw}")
        try:
            if isinstance(rank, str):
                rank = _NAME_RANKS.get(rank.upper()) or int(rank)
            rank = int(rank)
        except (TypeError, ValueError):
            raise ValueError(f"bad input card: {value}") from None
        return Card(rank=rank, suit=suit)
    raise ValueError(f"bad input card: {value!r}")


def _first(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None
