# Area: Game
"""
cribbage_client._game.snapshot — Server snapshot models
========================================================

Pydantic models for the payloads the game server returns: the full
game snapshot and the active-games listing.

Parsing also normalizes the snapshot:
- crib, cut card and pegged cards are reset in a Deal snapshot
  (none of them exists before the deal)
- peg positions are keyed by exactly the player ids; a missing
  player is filled in at 0, a stray key rejects the snapshot
"""

from __future__ import annotations
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    field_validator,
    model_validator,
)

from .cards import card_from_wire
from .enums import Phase, parse_phase

CardField = Annotated[
    Any,
    PlainValidator(card_from_wire),
    PlainSerializer(lambda card: card.to_wire()),
]

# Server codes for player colors
_PLAYER_COLORS = {0: "green", 1: "blue", 2: "red"}


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class PlayerInfo(BaseModel):
    """One seat at the table. Fixed for the lifetime of a match."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(validation_alias=_aliases("id", "ID", "playerID"))
    display_name: str = Field(
        default="", validation_alias=_aliases("display_name", "displayName", "name", "Name"),
    )
    color: str = Field(default="", validation_alias=_aliases("color", "Color"))

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> str:
        return str(value)

    @field_validator("color", mode="before")
    @classmethod
    def _color_name(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            return _PLAYER_COLORS.get(value, "notacolor")
        return str(value)


class PeggedCard(BaseModel):
    """A card played during pegging and the player who played it."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    card: CardField
    player_id: str = Field(validation_alias=_aliases("player_id", "playerID", "PlayerID"))

    @model_validator(mode="before")
    @classmethod
    def _embedded_card(cls, data: Any) -> Any:
        # the server may embed the card fields next to the player id
        if isinstance(data, dict) and "card" not in data:
            data = dict(data)
            data["card"] = {
                k: v for k, v in data.items()
                if k not in ("player_id", "playerID", "PlayerID")
            }
        return data

    @field_validator("player_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> str:
        return str(value)


class GameSnapshot(BaseModel):
    """
    Full, server-authoritative representation of one match.

    Keys are accepted in the server's camelCase, snake_case or
    capitalized form. Player ids are always strings.
    """
    model_config = ConfigDict(populate_by_name=True)

    game_id: Optional[str] = Field(
        default=None, validation_alias=_aliases("game_id", "gameID", "ID", "id"),
    )
    phase: Phase = Field(validation_alias=_aliases("phase", "Phase"))
    players: List[PlayerInfo] = Field(
        default_factory=list, validation_alias=_aliases("players", "Players"),
    )
    hands: Dict[str, List[CardField]] = Field(
        default_factory=dict, validation_alias=_aliases("hands", "Hands"),
    )
    crib: List[CardField] = Field(
        default_factory=list, validation_alias=_aliases("crib", "Crib"),
    )
    cut_card: Optional[CardField] = Field(
        default=None, validation_alias=_aliases("cut_card", "cutCard", "CutCard"),
    )
    peg_positions: Dict[str, int] = Field(
        default_factory=dict, validation_alias=_aliases("peg_positions", "pegPositions"),
    )
    current_dealer: Optional[str] = Field(
        default=None,
        validation_alias=_aliases("current_dealer", "currentDealer", "CurrentDealer"),
    )
    current_scores: Dict[str, int] = Field(
        default_factory=dict,
        validation_alias=_aliases("current_scores", "currentScores", "CurrentScores"),
    )
    lag_scores: Dict[str, int] = Field(
        default_factory=dict,
        validation_alias=_aliases("lag_scores", "lagScores", "LagScores"),
    )
    blocking_players: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=_aliases("blocking_players", "blockingPlayers", "BlockingPlayers"),
    )
    pegged_cards: List[PeggedCard] = Field(
        default_factory=list,
        validation_alias=_aliases("pegged_cards", "peggedCards", "PeggedCards"),
    )

    @field_validator("game_id", "current_dealer", mode="before")
    @classmethod
    def _optional_id_as_str(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("phase", mode="before")
    @classmethod
    def _parse_phase(cls, value: Any) -> Phase:
        return parse_phase(value)

    @field_validator(
        "hands", "peg_positions", "current_scores", "lag_scores", "blocking_players",
        mode="before",
    )
    @classmethod
    def _keys_as_str(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    @field_validator("crib", "pegged_cards", "players", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("cut_card", mode="after")
    @classmethod
    def _hidden_cut_is_absent(cls, value: Any) -> Any:
        return value if value else None

    @model_validator(mode="after")
    def _normalize(self) -> "GameSnapshot":
        player_ids = [p.id for p in self.players]
        stray = sorted(set(self.peg_positions) - set(player_ids))
        if stray:
            raise ValueError(f"peg positions for unknown players: {stray}")
        self.peg_positions = {
            pid: self.peg_positions.get(pid, 0) for pid in player_ids
        }

        if self.phase == Phase.DEAL:
            self.crib = []
            self.cut_card = None
            self.pegged_cards = []
        return self

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def hand_of(self, player_id: str) -> list:
        return list(self.hands.get(str(player_id), []))

    def player(self, player_id: str) -> Optional[PlayerInfo]:
        for p in self.players:
            if p.id == str(player_id):
                return p
        return None


class ActiveGame(BaseModel):
    """One row of a player's active-games listing."""
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(validation_alias=_aliases("game_id", "gameID"))
    players: List[PlayerInfo] = Field(default_factory=list)
    created: Optional[str] = None
    last_move: Optional[str] = Field(
        default=None, validation_alias=_aliases("last_move", "lastMove"),
    )

    @field_validator("game_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> str:
        return str(value)

    def opponents(self, player_id: str) -> List[PlayerInfo]:
        return [p for p in self.players if p.id != str(player_id)]

    def color_of(self, player_id: str) -> Optional[str]:
        for p in self.players:
            if p.id == str(player_id):
                return p.color
        return None


class ActiveGames(BaseModel):
    """Response of GET /games/active."""
    model_config = ConfigDict(populate_by_name=True)

    player: PlayerInfo
    active_games: List[ActiveGame] = Field(
        default_factory=list, validation_alias=_aliases("active_games", "activeGames"),
    )

    @field_validator("active_games", mode="before")
    @classmethod
    def _drop_empty_rows(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [
                g for g in value
                if isinstance(g, ActiveGame)
                or (isinstance(g, dict) and (g.get("gameID") or g.get("game_id")))
            ]
        return value
