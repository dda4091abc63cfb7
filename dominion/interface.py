"""Text views of a game and the computer player's turn."""

from __future__ import annotations

import math
import sys
from contextlib import suppress
from typing import TextIO

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    Card,
    card_name,
    display_cost,
    phase_name,
)
from .game import GameError, GameState
from .rngs import RandomStreams

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_COMMANDS = (
    ("add [Supply Card Number] \t\t\t", "add any card to your hand (teh hacks)"),
    ("buy [Supply Card Number] \t\t\t", "buy a card at supply position"),
    ("end \t\t\t      \t\t\t", "end your turn"),
    ("init [Number of Players] [Number of Bots] \t", "initialize the game"),
    ("num \t\t\t      \t\t\t", "print number of cards in your hand"),
    ("play [Hand Index] [Choice] [Choice] [Choice]\t", "play a card from your hand"),
    ("resign\t\t\t\t\t", "end the game showing the current scores"),
    ("show \t\t\t\t\t\t", "show your current hand"),
    ("stat \t\t\t\t\t\t", "show your turn's status"),
    ("supp \t\t\t\t\t\t", "show the supply"),
    ("whos \t\t\t      \t\t\t", "whos turn"),
    ("exit \t\t\t      \t\t\t", "exit the interface"),
)


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} cannot be added to a hand")
    state.hands[player].append(Card(card))


def count_hand_coins(state: GameState, player: int) -> int:
    """Coins provided by the treasures in a player's hand."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hands[player])


def select_kingdom_cards(seed: int) -> list[int]:
    """Pick ten different kingdom cards at random from ``seed``."""
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    chosen: list[int] = []
    while len(chosen) < NUM_K_CARDS:
        card = math.floor(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def _pile_text(title: str, cards: list[int], suffix: str) -> str:
    lines = [title]
    if cards:
        lines.append("#  Card\n")
    lines.extend(
        f"{index:<2d} {card_name(card):<13s}{suffix}\n"
        for index, card in enumerate(cards)
    )
    lines.append("\n")
    return "".join(lines)


def hand_text(state: GameState, player: int) -> str:
    """Listing of a player's hand."""
    return _pile_text(f"Player {player}'s hand:\n", state.hands[player], "")


def deck_text(state: GameState, player: int) -> str:
    """Listing of a player's deck."""
    return _pile_text(f"Player {player}'s deck: \n", state.decks[player], "")


def discard_text(state: GameState, player: int) -> str:
    """Listing of a player's discard pile."""
    return _pile_text(
        f"Player {player}'s discard: \n", state.discards[player], " "
    )


def played_text(state: GameState, player: int) -> str:
    """Listing of the cards played this turn."""
    return _pile_text(
        f"Player {player}'s played cards: \n", state.played_cards, " "
    )


def supply_text(state: GameState) -> str:
    """Table of the supply piles in play with their cost and size."""
    lines = ["#   Card          Cost   Copies\n"]
    for card in Card:
        count = state.supply[card]
        if count == -1:
            continue
        lines.append(
            f"{int(card):<2d}  {card_name(card):<13s} "
            f"{display_cost(card):<5d}  {count:<5d}\n"
        )
    lines.append("\n")
    return "".join(lines)


def state_text(state: GameState) -> str:
    """Summary of the current turn."""
    return (
        f"Player {state.whose_turn}:\n"
        f"{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n"
        f"{state.coins} coins\n"
        f"{state.num_buys} buys\n\n"
    )


def scores_text(state: GameState) -> str:
    """One score line per player."""
    return "".join(
        f"Player {player} has a score of {state.score_for(player)}\n"
        for player in range(state.num_players)
    )


def help_text() -> str:
    """The list of interactive commands."""
    body = "\n".join(f"  {usage}- {what}" for usage, what in _COMMANDS)
    return f"Commands are: \n{body}\n\n"


def execute_bot_turn(
    state: GameState, player: int, turn_num: int, out: TextIO | None = None
) -> int:
    """Play one turn for a computer player and return the new turn number."""
    out = sys.stdout if out is None else out
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(supply_text(state))

    choice: Card | None = None
    if coins >= Card.PROVINCE.cost and state.supply_count(Card.PROVINCE) > 0:
        choice = Card.PROVINCE
    elif state.supply_count(Card.PROVINCE) == 0 and coins >= Card.DUCHY.cost:
        choice = Card.DUCHY
    elif coins >= Card.GOLD.cost and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= Card.SILVER.cost and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    if choice is not None:
        with suppress(GameError):
            state.buy_card(choice)
        out.write(f"Player {player} buys card {choice.label}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num