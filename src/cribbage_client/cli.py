"""
cribbage_client.cli — Command-line interface
=============================================

Thin driver over CribbageClient for checking a server by hand.

Usage:
    cribbage-client --player 42 active            # List a player's active games
    cribbage-client --player 42 show 7            # Summarize one game's snapshot
    cribbage-client --config config.json active   # Read settings from a file

Settings can also come from a .env file or the environment
(CRIBBAGE_SERVER_URL, CRIBBAGE_PLAYER_ID, ...).
"""

import argparse
import sys
from typing import List, Optional

from .client import CribbageClient
from .errors import ConfigError
from ._game.snapshot import ActiveGames, GameSnapshot
from ._shared.config import load_config, validate_config
from ._shared.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Cribbage client - inspect games on a cribbage server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cribbage-client --server http://localhost:8080 --player 42 active
  cribbage-client show 7
  CRIBBAGE_SERVER_URL=http://localhost:8080 cribbage-client active
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--server", type=str, help="Game server base URL")
    parser.add_argument("--player", type=str, help="Player ID")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("active", help="List the player's active games")
    show = sub.add_parser("show", help="Fetch and summarize a game")
    show.add_argument("game_id", type=str, help="Game ID")

    return parser.parse_args(argv)


def format_active_games(listing: ActiveGames) -> str:
    player_id = listing.player.id
    lines = [f"Active games for {listing.player.display_name or player_id}:"]
    if not listing.active_games:
        lines.append("  (none)")
    for game in listing.active_games:
        opponents = ", ".join(p.display_name or p.id for p in game.opponents(player_id))
        color = game.color_of(player_id) or "?"
        lines.append(
            f"  {game.game_id:>8}  vs {opponents or '-'}  [{color}]"
            f"  last move: {game.last_move or '-'}"
        )
    return "\n".join(lines)


def format_snapshot(snapshot: GameSnapshot, player_id: Optional[str] = None) -> str:
    lines = [f"Game {snapshot.game_id or '?'}  phase: {snapshot.phase.value}"]
    for player in snapshot.players:
        marker = "*" if player.id == player_id else " "
        hand = " ".join(str(c) for c in snapshot.hand_of(player.id)) or "-"
        lines.append(
            f" {marker}{player.display_name or player.id} ({player.color})"
            f"  peg: {snapshot.peg_positions.get(player.id, 0)}  hand: {hand}"
        )
    if snapshot.crib:
        lines.append(f"  crib: {' '.join(str(c) for c in snapshot.crib)}")
    if snapshot.cut_card:
        lines.append(f"  cut: {snapshot.cut_card}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = load_config(args.config)
    if args.server:
        config["server_url"] = args.server
    if args.player:
        config["player_id"] = args.player

    try:
        validate_config(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via --server, a config file or CRIBBAGE_SERVER_URL.", file=sys.stderr)
        return 1

    setup_logging(config["log_file"], config["log_level"])

    with CribbageClient.from_config(config) as client:
        if args.command == "active":
            result = client.refresh_active_games()
            if result.ok:
                print(format_active_games(result.value))
        else:
            outcome = client.join(args.game_id)
            if outcome.ok:
                print(format_snapshot(client.state.current_game, client.player_id))
            result = outcome

        for alert in client.alerts:
            print(f"[{alert.severity.value}] {alert.message}", file=sys.stderr)
        return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
