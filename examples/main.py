"""
main.py — Play one cribbage hand from a script
===============================================

Joins a game on a running cribbage server and walks one player's
turn through the phases it can act in.

    python main.py

The client will:
  1. Fetch the game snapshot for GAME_ID
  2. Shuffle and deal, or discard two cards to the crib,
     or cut the deck, or peg the first playable card
  3. Print whatever alerts the server produced

Settings can also come from a .env file (CRIBBAGE_SERVER_URL, ...).
"""

import logging
from cribbage_client import CribbageClient, Phase

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ── Configuration ──
config = {
    # Game server started with `go run server/main.go`
    "server_url": "http://localhost:8080",

    # Your player id (from the active games listing)
    "player_id": "1",

    # Seconds before a request is given up
    "request_timeout_seconds": 10,
}

GAME_ID = "1"

# ── Join and take one step ──
with CribbageClient.from_config(config) as client:
    outcome = client.join(GAME_ID)
    game = client.state.current_game

    if outcome.ok:
        hand = game.hand_of(client.player_id)
        print(f"Phase {game.phase.value}, hand: {' '.join(map(str, hand))}")

        if game.phase == Phase.DEAL:
            for _ in range(3):
                client.shuffle()
            outcome = client.deal()
        elif game.phase == Phase.BUILD_CRIB:
            for card in hand[:2]:
                client.toggle_card(card)
            outcome = client.build_crib()
        elif game.phase == Phase.CUT:
            client.choose_cut(0.4)
            outcome = client.cut()
        elif game.phase == Phase.PEG:
            if hand:
                client.toggle_card(hand[0])
            outcome = client.peg()

    if outcome.ok and client.state.current_game is not None:
        print(f"Now in phase {client.state.phase.value}")
    else:
        print(f"Step failed: {outcome.error}")

    for alert in client.alerts:
        print(f"[{alert.severity.value}] {alert.message}")
