"""Action card effects and playing a card from the hand."""

from __future__ import annotations

from contextlib import suppress

from .cards import Card, Phase, card_cost
from .game import Destination, GameError, GameState

_FEAST_BUDGET = 5
_TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
_TRIBUTE_VICTORY = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)


def _draw(state: GameState, player: int, times: int) -> None:
    for _ in range(times):
        state.draw_card(player)


def _gain_if_possible(
    state: GameState, card: int, player: int, to: int = Destination.DISCARD
) -> None:
    with suppress(GameError):
        state.gain_card(card, player, to)


def _others(state: GameState, current: int) -> list[int]:
    return [p for p in range(state.num_players) if p != current]


def _discard_first(state: GameState, player: int, card: int) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player, False)


def _adventurer(state: GameState, current: int) -> None:
    hand = state.hands[current]
    set_aside = []
    treasures = 0
    while treasures < 2:
        drawn = state.draw_card(current)
        if drawn is None:
            break
        if drawn in _TREASURES:
            treasures += 1
        else:
            set_aside.append(hand.pop())
    state.discards[current].extend(reversed(set_aside))


def _council_room(state: GameState, current: int, hand_pos: int) -> None:
    _draw(state, current, 4)
    state.num_buys += 1
    for other in _others(state, current):
        state.draw_card(other)
    state.discard_card(hand_pos, current, False)


def _feast(state: GameState, current: int, choice1: int) -> None:
    state.coins = _FEAST_BUDGET
    if state.supply_count(choice1) <= 0:
        raise GameError(f"no cards of type {choice1} left")
    if state.coins < card_cost(choice1):
        raise GameError("that card is too expensive")
    state.gain_card(choice1, current, Destination.DISCARD)


def _mine(
    state: GameState, current: int, choice1: int, choice2: int, hand_pos: int
) -> None:
    trashed = state.hand_card(choice1)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("mine must trash a treasure")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"unknown card {choice2}")
    if card_cost(trashed) + 3 > card_cost(choice2):
        raise GameError("gained card costs too much")
    _gain_if_possible(state, choice2, current, Destination.HAND)
    state.discard_card(hand_pos, current, False)
    _discard_first(state, current, trashed)


def _remodel(
    state: GameState, current: int, choice1: int, choice2: int, hand_pos: int
) -> None:
    trashed = state.hand_card(choice1)
    if card_cost(trashed) + 2 > card_cost(choice2):
        raise GameError("gained card costs too much")
    _gain_if_possible(state, choice2, current, Destination.DISCARD)
    state.discard_card(hand_pos, current, False)
    _discard_first(state, current, trashed)


def _baron(state: GameState, current: int, choice1: int) -> None:
    state.num_buys += 1
    hand = state.hands[current]
    if choice1 > 0 and Card.ESTATE in hand:
        state.coins += 4
        state.discards[current].append(hand.pop(hand.index(Card.ESTATE)))
        return
    if state.supply_count(Card.ESTATE) > 0:
        _gain_if_possible(state, Card.ESTATE, current, Destination.DISCARD)
        state.supply[Card.ESTATE] -= 1


def _minion(
    state: GameState, current: int, choice1: int, choice2: int, hand_pos: int
) -> None:
    state.num_actions += 1
    state.discard_card(hand_pos, current, False)
    if choice1:
        state.coins += 2
        return
    if not choice2:
        return
    _redraw(state, current)
    for other in _others(state, current):
        if len(state.hands[other]) > 4:
            _redraw(state, other)


def _redraw(state: GameState, player: int) -> None:
    hand = state.hands[player]
    state.played_cards.extend(hand)
    hand.clear()
    _draw(state, player, 4)


def _steward(
    state: GameState,
    current: int,
    choice1: int,
    choice2: int,
    choice3: int,
    hand_pos: int,
) -> None:
    if choice1 == 1:
        _draw(state, current, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, current, True)
        state.discard_card(choice3, current, True)
    state.discard_card(hand_pos, current, False)


def _tribute(state: GameState, current: int) -> None:
    nxt = (current + 1) % state.num_players
    deck, discard = state.decks[nxt], state.discards[nxt]
    revealed: list[int | None] = [None, None]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
        elif discard:
            revealed[0] = discard.pop()
    else:
        if not deck:
            half = (len(discard) + 1) // 2
            deck.extend(discard[:half])
            del discard[:half]
            state.shuffle(nxt)
        revealed[0] = deck[-1]
        revealed[1] = deck[-3] if len(deck) >= 3 else None
        del deck[-4:]

    if revealed[0] == revealed[1]:
        if revealed[1] is not None:
            state.played_cards.append(revealed[1])
        revealed[1] = None

    for card in revealed:
        if card in _TREASURES:
            state.coins += 2
        elif card in _TRIBUTE_VICTORY:
            _draw(state, current, 2)
        else:
            state.num_actions += 2


def _ambassador(
    state: GameState, current: int, choice1: int, choice2: int, hand_pos: int
) -> None:
    if not 0 <= choice2 <= 2:
        raise GameError("can return 0 to 2 copies")
    if choice1 == hand_pos:
        raise GameError("cannot reveal the ambassador itself")
    revealed = state.hand_card(choice1)
    hand = state.hands[current]
    copies = sum(
        1
        for i in range(len(hand))
        if i != hand_pos and i == revealed and i != choice1
    )
    if copies < choice2:
        raise GameError("not enough copies to return")

    state.supply[revealed] += choice2
    for other in _others(state, current):
        _gain_if_possible(state, revealed, other, Destination.DISCARD)
    state.discard_card(hand_pos, current, False)

    for _ in range(choice2):
        hand = state.hands[current]
        if choice1 >= len(hand):
            break
        state.discard_card(hand.index(hand[choice1]), current, True)


def _cutpurse(state: GameState, current: int, hand_pos: int) -> None:
    state.update_coins(current, 2)
    for other in _others(state, current):
        hand = state.hands[other]
        if Card.COPPER in hand:
            state.discard_card(hand.index(Card.COPPER), other, False)
    state.discard_card(hand_pos, current, False)


def _embargo(state: GameState, current: int, choice1: int, hand_pos: int) -> None:
    state.coins += 2
    if state.supply_count(choice1) == -1:
        raise GameError(f"supply pile {choice1} is not in play")
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, current, True)


def _salvager(state: GameState, current: int, choice1: int, hand_pos: int) -> None:
    state.num_buys += 1
    if choice1:
        state.coins += card_cost(state.hand_card(choice1))
        state.discard_card(choice1, current, True)
    state.discard_card(hand_pos, current, False)


def _sea_hag(state: GameState, current: int) -> None:
    for other in _others(state, current):
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state: GameState, current: int, hand_pos: int) -> None:
    hand = state.hands[current]
    index = next(
        (
            i
            for i, card in enumerate(hand)
            if card == Card.TREASURE_MAP and i != hand_pos
        ),
        None,
    )
    if index is None:
        raise GameError("no second treasure map in hand")
    state.discard_card(hand_pos, current, True)
    if index < len(hand):
        state.discard_card(index, current, True)
    else:
        hand.pop()
    for _ in range(4):
        _gain_if_possible(state, Card.GOLD, current, Destination.DECK)


def card_effect(
    state: GameState,
    card: int,
    choice1: int,
    choice2: int,
    choice3: int,
    hand_pos: int,
) -> None:
    """Carry out the effect of an action card played by the current player.

    Raises GameError when the card cannot be played with these choices.
    """
    current = state.whose_turn
    if card == Card.ADVENTURER:
        _adventurer(state, current)
    elif card == Card.COUNCIL_ROOM:
        _council_room(state, current, hand_pos)
    elif card == Card.FEAST:
        _feast(state, current, choice1)
    elif card == Card.MINE:
        _mine(state, current, choice1, choice2, hand_pos)
    elif card == Card.REMODEL:
        _remodel(state, current, choice1, choice2, hand_pos)
    elif card == Card.SMITHY:
        _draw(state, current, 3)
        state.discard_card(hand_pos, current, False)
    elif card == Card.VILLAGE:
        state.draw_card(current)
        state.num_actions += 2
        state.discard_card(hand_pos, current, False)
    elif card == Card.BARON:
        _baron(state, current, choice1)
    elif card == Card.GREAT_HALL:
        state.draw_card(current)
        state.num_actions += 1
        state.discard_card(hand_pos, current, False)
    elif card == Card.MINION:
        _minion(state, current, choice1, choice2, hand_pos)
    elif card == Card.STEWARD:
        _steward(state, current, choice1, choice2, choice3, hand_pos)
    elif card == Card.TRIBUTE:
        _tribute(state, current)
    elif card == Card.AMBASSADOR:
        _ambassador(state, current, choice1, choice2, hand_pos)
    elif card == Card.CUTPURSE:
        _cutpurse(state, current, hand_pos)
    elif card == Card.EMBARGO:
        _embargo(state, current, choice1, hand_pos)
    elif card == Card.OUTPOST:
        state.outpost_played += 1
        state.discard_card(hand_pos, current, False)
    elif card == Card.SALVAGER:
        _salvager(state, current, choice1, hand_pos)
    elif card == Card.SEA_HAG:
        _sea_hag(state, current)
    elif card == Card.TREASURE_MAP:
        _treasure_map(state, current, hand_pos)
    else:
        raise GameError(f"card {card} has no action effect")


def play_card(
    state: GameState, hand_pos: int, choice1: int, choice2: int, choice3: int
) -> None:
    """Play the action card at ``hand_pos`` from the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError(f"card {card} is not an action card")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)