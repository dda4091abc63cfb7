from collections import Counter

import pytest

from dominion.cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    HANDSIZE,
    MAX_PLAYERS,
    SILVER_VALUE,
    START_COPPER,
    START_ESTATE,
    Card,
    Phase,
)
from dominion.game import (
    Destination,
    GameError,
    GameState,
    kingdom_cards,
    new_game,
)

KINGDOM = [
    Card.ADVENTURER,
    Card.COUNCIL_ROOM,
    Card.FEAST,
    Card.GARDENS,
    Card.MINE,
    Card.REMODEL,
    Card.SMITHY,
    Card.VILLAGE,
    Card.BARON,
    Card.GREAT_HALL,
]


@pytest.fixture
def game():
    return new_game(2, KINGDOM, 1)


def test_kingdom_cards_collects_ten():
    assert kingdom_cards(*KINGDOM) == KINGDOM


def test_kingdom_cards_rejects_wrong_count():
    with pytest.raises(ValueError):
        kingdom_cards(*KINGDOM[:9])


def test_supply_with_four_players():
    state = new_game(4, KINGDOM, 1)
    assert state.supply_count(Card.ADVENTURER) == 10
    assert state.supply_count(Card.CURSE) == 30
    assert state.supply_count(Card.PROVINCE) == 12
    assert state.supply_count(Card.GARDENS) == 12


def test_supply_with_two_players(game):
    assert game.supply_count(Card.CURSE) == 10
    assert game.supply_count(Card.ESTATE) == 8
    assert game.supply_count(Card.GREAT_HALL) == 8
    assert game.supply_count(Card.MINION) == -1
    assert game.supply_count(Card.SILVER) == 40


@pytest.mark.parametrize("players", [1, 5])
def test_invalid_player_count(players):
    with pytest.raises(GameError):
        new_game(players, KINGDOM, 1)


def test_duplicate_kingdom_rejected():
    with pytest.raises(GameError):
        new_game(2, KINGDOM[:9] + [Card.ADVENTURER], 1)


def test_initial_decks_and_hand(game):
    for player in range(2):
        assert game.full_deck_count(player, Card.COPPER) == START_COPPER
        assert game.full_deck_count(player, Card.ESTATE) == START_ESTATE
    assert game.num_hand_cards() == HANDSIZE
    assert game.hands[1] == []
    assert game.whose_turn == 0
    assert game.phase == Phase.ACTION
    assert game.coins == game.hands[0].count(Card.COPPER) * COPPER_VALUE


def test_same_seed_same_game():
    first = new_game(2, KINGDOM, 7)
    second = new_game(2, KINGDOM, 7)
    assert first.decks == second.decks
    assert first.hands == second.hands


def test_shuffle_keeps_cards(game):
    before = Counter(game.decks[1])
    game.shuffle(1)
    assert Counter(game.decks[1]) == before


def test_shuffle_empty_deck_raises(game):
    game.decks[1].clear()
    with pytest.raises(GameError):
        game.shuffle(1)


def test_draw_from_deck_takes_top(game):
    top = game.decks[1][-1]
    size = len(game.decks[1])
    assert game.draw_card(1) == top
    assert game.hands[1] == [top]
    assert len(game.decks[1]) == size - 1


def test_draw_reshuffles_discard(game):
    game.discards[1] = game.decks[1]
    game.decks[1] = []
    total = len(game.discards[1])
    drawn = game.draw_card(1)
    assert drawn in (Card.COPPER, Card.ESTATE)
    assert game.discards[1] == []
    assert len(game.decks[1]) == total - 1


def test_draw_from_nothing_returns_none(game):
    game.decks[1].clear()
    game.discards[1].clear()
    assert game.draw_card(1) is None
    assert game.hands[1] == []


def test_hand_card_out_of_range(game):
    with pytest.raises(GameError):
        game.hand_card(HANDSIZE)


def test_discard_card_moves_last_into_place(game):
    game.hands[0] = [Card.COPPER, Card.ESTATE, Card.SILVER]
    game.discard_card(0, 0)
    assert game.hands[0] == [Card.SILVER, Card.ESTATE]
    assert game.played_cards == [Card.COPPER]


def test_trash_does_not_play(game):
    game.hands[0] = [Card.COPPER, Card.ESTATE]
    game.discard_card(1, 0, trash=True)
    assert game.hands[0] == [Card.COPPER]
    assert game.played_cards == []


def test_discard_invalid_position(game):
    game.hands[0] = []
    with pytest.raises(GameError):
        game.discard_card(0, 0)


@pytest.mark.parametrize(
    "dest, attr",
    [
        (Destination.DISCARD, "discards"),
        (Destination.DECK, "decks"),
        (Destination.HAND, "hands"),
    ],
)
def test_gain_card_destinations(game, dest, attr):
    before = game.supply_count(Card.GOLD)
    game.gain_card(Card.GOLD, 1, dest)
    assert getattr(game, attr)[1][-1] == Card.GOLD
    assert game.supply_count(Card.GOLD) == before - 1


def test_gain_unused_card_raises(game):
    with pytest.raises(GameError):
        game.gain_card(Card.MINION, 0)


def test_gain_empty_pile_raises(game):
    game.supply[Card.GOLD] = 0
    with pytest.raises(GameError):
        game.gain_card(Card.GOLD, 0)


def test_supply_count_unknown_card(game):
    with pytest.raises(GameError):
        game.supply_count(len(Card))


def test_update_coins(game):
    game.hands[0] = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE]
    game.update_coins(0, 2)
    assert game.coins == COPPER_VALUE + SILVER_VALUE + GOLD_VALUE + 2


def test_buy_card(game):
    game.coins = Card.SILVER.cost
    before = game.supply_count(Card.SILVER)
    game.buy_card(Card.SILVER)
    assert game.coins == 0
    assert game.num_buys == 0
    assert game.phase == Phase.BUY
    assert game.discards[0][-1] == Card.SILVER
    assert game.supply_count(Card.SILVER) == before - 1


def test_buy_card_without_coins(game):
    game.coins = Card.PROVINCE.cost - 1
    with pytest.raises(GameError):
        game.buy_card(Card.PROVINCE)
    assert game.num_buys == 1


def test_buy_card_without_buys(game):
    game.coins = Card.GOLD.cost
    game.num_buys = 0
    with pytest.raises(GameError):
        game.buy_card(Card.GOLD)


def test_end_turn(game):
    hand = list(game.hands[0])
    game.end_turn()
    assert game.whose_turn == 1
    assert game.discards[0] == hand
    assert game.hands[0] == []
    assert game.num_hand_cards() == HANDSIZE
    assert game.num_actions == 1 and game.num_buys == 1
    game.end_turn()
    assert game.whose_turn == 0


def test_game_over_when_provinces_gone(game):
    assert not game.is_game_over()
    game.supply[Card.PROVINCE] = 0
    assert game.is_game_over()


def test_game_over_when_three_piles_empty(game):
    game.supply[Card.SMITHY] = 0
    game.supply[Card.VILLAGE] = 0
    assert not game.is_game_over()
    game.supply[Card.GOLD] = 0
    assert game.is_game_over()


def test_initial_score_counts_hand_estates(game):
    assert game.score_for(0) == game.hands[0].count(Card.ESTATE)
    assert game.score_for(1) == 0


def test_get_winners_single(game):
    game.hands[0] = [Card.PROVINCE]
    game.discards[0] = []
    game.hands[1] = []
    game.discards[1] = []
    assert game.get_winners() == [1, 0, 0, 0]


def test_get_winners_tie_favours_later_player(game):
    for player in range(2):
        game.hands[player] = [Card.ESTATE]
        game.discards[player] = []
    winners = game.get_winners()
    assert len(winners) == MAX_PLAYERS
    assert winners == [0, 1, 0, 0]


def test_state_pads_piles():
    state = GameState(num_players=3)
    assert state.hands == [[], [], []]
    assert state.num_hand_cards() == 0