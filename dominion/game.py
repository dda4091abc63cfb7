"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    HANDSIZE,
    MAX_PLAYERS,
    NUM_K_CARDS,
    SILVER_VALUE,
    START_COPPER,
    START_ESTATE,
    Card,
    Phase,
    card_cost,
)
from .rngs import RandomStreams

_TREASURE_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}

# Only the first 25 supply piles take part in the three-empty-piles rule.
_GAME_OVER_PILES = 25
_UNUSED_SCORE = -9999


class GameError(Exception):
    """Raised when a game action is not allowed in the current state."""


class Destination(IntEnum):
    """Where a gained card is placed."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def kingdom_cards(*args: int) -> list[int]:
    """Collect exactly ten kingdom cards into a list."""
    if len(args) != NUM_K_CARDS:
        raise ValueError(f"expected {NUM_K_CARDS} kingdom cards, got {len(args)}")
    return list(args)


@dataclass
class GameState:
    """Complete state of one game. The top of a deck is the end of its list."""

    num_players: int
    supply: list[int] = field(default_factory=lambda: [-1] * len(Card))
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * len(Card))
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: int = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    hands: list[list[int]] = field(default_factory=list)
    decks: list[list[int]] = field(default_factory=list)
    discards: list[list[int]] = field(default_factory=list)
    played_cards: list[int] = field(default_factory=list)
    rng: RandomStreams = field(default_factory=RandomStreams, repr=False)

    def __post_init__(self) -> None:
        for piles in (self.hands, self.decks, self.discards):
            while len(piles) < self.num_players:
                piles.append([])

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck; raises GameError if the deck is empty."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no cards in the deck")
        deck.sort()
        shuffled = []
        while deck:
            shuffled.append(deck.pop(math.floor(self.rng.random() * len(deck))))
        deck.extend(shuffled)

    def buy_card(self, supply_pos: int) -> None:
        """Buy one card from a supply pile for the current player."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"no cards of type {supply_pos} left")
        cost = card_cost(supply_pos)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(supply_pos, self.whose_turn, Destination.DISCARD)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """Card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards left in a supply pile; -1 for a pile not used in this game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown card {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of ``card`` a player owns across deck, hand and discard."""
        return (
            self.decks[player].count(card)
            + self.hands[player].count(card)
            + self.discards[player].count(card)
        )

    def end_turn(self) -> None:
        """Discard the current hand and start the next player's turn."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()
        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()
        for _ in range(HANDSIZE):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn, 0)

    def is_game_over(self) -> bool:
        """True when provinces are gone or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_OVER_PILES] if count == 0)
        return empty >= 3

    def _card_points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points of a player.

        The deck is counted only as far as the size of the discard pile.
        """
        discard = self.discards[player]
        counted = (
            self.hands[player] + discard + self.decks[player][: len(discard)]
        )
        return sum(self._card_points(player, card) for card in counted)

    def get_winners(self) -> list[int]:
        """One entry per possible player: 1 for a winner, 0 otherwise."""
        scores = [
            self.score_for(i) if i < self.num_players else _UNUSED_SCORE
            for i in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and i > self.whose_turn else score
            for i, score in enumerate(scores)
        ]
        high = max(scores)
        return [1 if score == high else 0 for score in scores]

    def draw_card(self, player: int) -> int | None:
        """Move the top deck card to the hand, reshuffling the discard if needed.

        Returns the card drawn, or None when deck and discard are both empty.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                return None
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def discard_card(
        self, hand_pos: int, player: int, trash: bool = False
    ) -> None:
        """Remove a card from a hand, to the played pile unless trashed.

        The last card of the hand takes the place of the removed one.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        card = hand[hand_pos]
        if not trash:
            self.played_cards.append(card)
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(
        self, supply_pos: int, player: int, to: int = Destination.DISCARD
    ) -> None:
        """Take a card from the supply into a player's discard, deck or hand."""
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"supply pile {supply_pos} is empty or not in play")
        card = Card(supply_pos)
        if to == Destination.DECK:
            self.decks[player].append(card)
        elif to == Destination.HAND:
            self.hands[player].append(card)
        else:
            self.discards[player].append(card)
        self.supply[supply_pos] -= 1

    def update_coins(self, player: int, bonus: int) -> None:
        """Set coins to the treasure in a player's hand plus ``bonus``."""
        self.coins = (
            sum(_TREASURE_VALUES.get(card, 0) for card in self.hands[player])
            + bonus
        )


def new_game(num_players: int, kingdom: list[int], seed: int) -> GameState:
    """Set up supplies and decks, and deal the first player's hand."""
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)

    if not 2 <= num_players <= MAX_PLAYERS:
        raise GameError(f"number of players must be 2 to {MAX_PLAYERS}")
    kingdom = list(kingdom)
    if len(kingdom) != NUM_K_CARDS:
        raise GameError(f"expected {NUM_K_CARDS} kingdom cards")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply
    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        supply[card] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30

    for card in Card:
        if card < Card.ADVENTURER:
            continue
        if card in kingdom:
            if card in (Card.GREAT_HALL, Card.GARDENS):
                supply[card] = victory
            else:
                supply[card] = 10
        else:
            supply[card] = -1

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * START_ESTATE + [
            Card.COPPER
        ] * START_COPPER
    for player in range(num_players):
        state.shuffle(player)

    for _ in range(HANDSIZE):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn, 0)
    return state