"""A scripted two-player game: a Smithy player against an Adventurer player."""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import TextIO

from .cards import Card
from .effects import play_card
from .game import GameError, GameState, new_game
from .interface import count_hand_coins

KINGDOM = [
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
]


def _buy(state: GameState, card: Card) -> None:
    with suppress(GameError):
        state.buy_card(card)


def _play(state: GameState, hand_pos: int) -> None:
    with suppress(GameError):
        play_card(state, hand_pos, -1, -1, -1)


def _find(state: GameState, card: Card) -> int | None:
    hand = state.hands[state.whose_turn]
    positions = [i for i, c in enumerate(hand) if c == card]
    return positions[-1] if positions else None


def _smithy_turn(state: GameState, out: TextIO, bought: list[int]) -> None:
    money = count_hand_coins(state, 0)
    pos = _find(state, Card.SMITHY)
    if pos is not None:
        out.write(f"0: smithy played from position {pos}\n")
        _play(state, pos)
        out.write("smithy played.\n")
        money = count_hand_coins(state, 0)
    if money >= 8:
        out.write("0: bought province\n")
        _buy(state, Card.PROVINCE)
    elif money >= 6:
        out.write("0: bought gold\n")
        _buy(state, Card.GOLD)
    elif money >= 4 and bought[0] < 2:
        out.write("0: bought smithy\n")
        _buy(state, Card.SMITHY)
        bought[0] += 1
    elif money >= 3:
        out.write("0: bought silver\n")
        _buy(state, Card.SILVER)
    out.write("0: end turn\n")
    state.end_turn()


def _adventurer_turn(state: GameState, out: TextIO, bought: list[int]) -> None:
    player = state.whose_turn
    money = count_hand_coins(state, player)
    pos = _find(state, Card.ADVENTURER)
    if pos is not None:
        out.write(f"1: adventurer played from position {pos}\n")
        _play(state, pos)
        money = count_hand_coins(state, player)
    if money >= 8:
        out.write("1: bought province\n")
        _buy(state, Card.PROVINCE)
    elif money >= 6 and bought[1] < 2:
        out.write("1: bought adventurer\n")
        _buy(state, Card.ADVENTURER)
        bought[1] += 1
    elif money >= 6:
        out.write("1: bought gold\n")
        _buy(state, Card.GOLD)
    elif money >= 3:
        out.write("1: bought silver\n")
        _buy(state, Card.SILVER)
    out.write("1: endTurn\n")
    state.end_turn()


def play_game(seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play a whole scripted game and return both players' scores."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    state = new_game(2, KINGDOM, seed)
    bought = [0, 0]
    while not state.is_game_over():
        if state.whose_turn == 0:
            _smithy_turn(state, out, bought)
        else:
            _adventurer_turn(state, out, bought)
    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: list[str] | None = None) -> int:
    """Run a scripted game with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: playdom [integer random number seed]")
        return 1
    try:
        seed = int(args[0])
    except ValueError:
        print("Usage: playdom [integer random number seed]")
        return 1
    play_game(seed, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())