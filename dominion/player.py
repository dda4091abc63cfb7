"""Interactive command interface for humans and computer players."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .cards import MAX_PLAYERS, Card, card_name
from .effects import play_card
from .game import GameError, new_game
from .interface import (
    add_card_to_hand,
    deck_text,
    discard_text,
    execute_bot_turn,
    hand_text,
    help_text,
    played_text,
    scores_text,
    state_text,
    supply_text,
)

KINGDOM = [
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
]

USAGE = "Usage: player [integer random number seed]"
UNUSED = -1


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * 4
    args: list[int] = []
    for token in tokens[1:5]:
        try:
            args.append(int(token))
        except ValueError:
            break
    args.extend([UNUSED] * (4 - len(args)))
    return tokens[0], args


def _is(command: str, keyword: str) -> bool:
    return command[:4] == keyword[:4]


def run_session(seed: int, lines: Iterable[str], out: TextIO | None = None) -> None:
    """Run the command loop, reading commands from ``lines``.

    The session ends on ``exit``, ``resign``, the end of the game or the end
    of the input.
    """
    if seed <= 0:
        raise ValueError("seed must be a positive integer")
    out = sys.stdout if out is None else out
    source = iter(lines)
    bots: set[int] = set()
    started = False
    turn_num = 0
    game = new_game(2, KINGDOM, seed)

    out.write('Please enter a command or "help" for commands\n')
    while True:
        current = game.whose_turn
        if started and game.is_game_over():
            out.write(scores_text(game))
            winners = game.get_winners()
            out.write(f"After {turn_num} turns, the winner(s) are:\n")
            for player in range(game.num_players):
                if winners[player] == 1:
                    out.write(f"Player {player}\n")
            for player in range(game.num_players):
                out.write(hand_text(game, player))
                out.write(played_text(game, player))
                out.write(discard_text(game, player))
                out.write(deck_text(game, player))
            break

        if current in bots:
            turn_num = execute_bot_turn(game, current, turn_num, out)
            continue

        out.write("$ ")
        if hasattr(out, "flush"):
            out.flush()
        try:
            line = next(source)
        except StopIteration:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)

        if _is(command, "add"):
            try:
                add_card_to_hand(game, current, arg0)
            except GameError:
                pass
            out.write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _is(command, "buy"):
            name = card_name(arg0)
            try:
                game.buy_card(arg0)
            except GameError:
                out.write(f"Player {current} cannot buy card {arg0}, {name}\n\n")
            else:
                out.write(f"Player {current} buys card {arg0}, {name}\n\n")
        elif _is(command, "end"):
            if started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _is(command, "exit"):
            break
        elif _is(command, "help"):
            out.write(help_text())
        elif _is(command, "init"):
            try:
                fresh = new_game(arg0, KINGDOM, seed)
            except GameError:
                fresh = None
            out.write("\n")
            if fresh is not None:
                game = fresh
                bots.update(
                    p for p in range(max(0, arg0 - arg1), arg0) if p < MAX_PLAYERS
                )
                started = True
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif _is(command, "num"):
            out.write(f"There are {game.num_hand_cards()} cards in your hand.\n")
        elif _is(command, "play"):
            try:
                card = game.hand_card(arg0)
                play_card(game, arg0, arg1, arg2, arg3)
            except GameError:
                out.write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                out.write(f"Player {current} plays {card_name(card)}\n\n")
        elif _is(command, "resign"):
            game.end_turn()
            out.write(scores_text(game))
            break
        elif _is(command, "show"):
            if started:
                out.write(hand_text(game, current))
                out.write(played_text(game, current))
        elif _is(command, "stat"):
            if started:
                out.write(state_text(game))
        elif _is(command, "supp"):
            out.write(supply_text(game))
        elif _is(command, "whos"):
            out.write(f"Player {game.whose_turn}'s turn\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        seed = int(args[0])
    except ValueError:
        seed = 0
    if seed <= 0:
        print(USAGE)
        return 0
    run_session(seed, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())