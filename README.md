# dominion

A deterministic engine for the Dominion deck-building card game.

Setting up a game, shuffling and the card effects all draw from a seeded
multi-stream Lehmer random generator, so a game started with the same seed
always plays out the same way.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `dominion-playdom SEED`

Plays a scripted two-player game with the given integer seed. Player 0 plays
Smithies and buys Province, Gold, up to two Smithies or Silver; player 1 plays
Adventurers and buys Province, up to two Adventurers, Gold or Silver. Every
move is printed, followed by both players' scores. Without a valid integer
seed it prints a usage line and exits with status 1.

```
dominion-playdom 42
```

### `dominion-player SEED`

Starts the interactive console. `SEED` must be a positive integer; otherwise
a usage line is printed. Commands are read at the `$ ` prompt; only the first
four letters of a command are compared.

| Command | Effect |
| --- | --- |
| `init PLAYERS BOTS` | start a game of 2 to 4 players, the last `BOTS` of them played by the computer |
| `show` | show your hand and the cards played this turn |
| `stat` | show the phase, actions, coins and buys |
| `num` | number of cards in your hand |
| `play POS [C1] [C2] [C3]` | play the action card at hand position `POS` with up to three choices |
| `buy CARD` | buy a card by its supply number |
| `add CARD` | put any kingdom card straight into your hand |
| `supp` | show the supply piles in play |
| `whos` | whose turn it is |
| `end` | end your turn |
| `resign` | end the turn, print the scores and stop |
| `help` | list the commands |
| `exit` | leave the console |

`show`, `stat` and `end` do nothing until a game has been started with
`init`. When the game is over the console prints the scores, the winners and
every player's hand, played cards, discard and deck, then stops.

```
dominion-player 7
$ init 2 1
$ show
$ buy 5
$ end
```

Computer players buy a Province when they can, a Duchy once the Provinces
are gone, otherwise Gold or Silver; they never play action cards.

## Library use

```python
from dominion.cards import Card, card_name
from dominion.effects import play_card
from dominion.game import GameError, kingdom_cards, new_game

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = new_game(2, kingdom, 1)

print([card_name(state.hand_card(i)) for i in range(state.num_hand_cards())])
try:
    state.buy_card(Card.SILVER)
except GameError as err:
    print("cannot buy:", err)
state.end_turn()
print(state.is_game_over(), state.score_for(0), state.get_winners())
```

The modules:

- `dominion.cards` — the `Card` and `Phase` enums, `card_cost`,
  `display_cost`, `card_name` and `phase_name`.
- `dominion.game` — `GameState` with the core rules (`draw_card`,
  `buy_card`, `gain_card`, `discard_card`, `end_turn`, `is_game_over`,
  `score_for`, `get_winners`, ...), `new_game`, `kingdom_cards` and
  `GameError`.
- `dominion.effects` — `play_card` and `card_effect` for the action cards.
- `dominion.interface` — text views of a game (`hand_text`, `supply_text`,
  `state_text`, `scores_text`, ...), `select_kingdom_cards` and
  `execute_bot_turn`.
- `dominion.playdom` — `play_game(seed, out)`, the scripted game.
- `dominion.player` — `run_session(seed, lines, out)`, the console fed from
  any iterable of command lines.

Illegal moves, such as buying without enough coins or playing a card outside
the action phase, raise `dominion.game.GameError`.

## Random generator

`dominion.rngs.RandomStreams` holds 256 Lehmer generator streams with
`random`, `put_seed`, `get_seed`, `plant_seeds` and `select_stream`.
`dominion.rngs.self_test()` checks it against its published reference values,
and `dominion.rngs.find_value(seed, target)` counts the draws from stream 1
until a value scaled to `[0, 10**9)` equals `target`.

Note that `put_seed(0)` asks for a seed on standard input, and a negative
seed takes the state from the clock.