"""Card and phase definitions, costs and display names."""

from __future__ import annotations

from enum import IntEnum

MAX_HAND = 500
MAX_DECK = 500
MAX_PLAYERS = 4

NUM_K_CARDS = 10
HANDSIZE = 5
START_COPPER = 7
START_ESTATE = 3

COPPER_VALUE = 1
SILVER_VALUE = 2
GOLD_VALUE = 3

UNKNOWN_DISPLAY_COST = 1000


class Card(IntEnum):
    """Every card type; the value is the card's supply position."""

    CURSE = 0
    ESTATE = 1
    DUCHY = 2
    PROVINCE = 3
    COPPER = 4
    SILVER = 5
    GOLD = 6
    ADVENTURER = 7
    COUNCIL_ROOM = 8
    FEAST = 9
    GARDENS = 10
    MINE = 11
    REMODEL = 12
    SMITHY = 13
    VILLAGE = 14
    BARON = 15
    GREAT_HALL = 16
    MINION = 17
    STEWARD = 18
    TRIBUTE = 19
    AMBASSADOR = 20
    CUTPURSE = 21
    EMBARGO = 22
    OUTPOST = 23
    SALVAGER = 24
    SEA_HAG = 25
    TREASURE_MAP = 26

    @property
    def label(self) -> str:
        """Human-readable card name."""
        return _NAMES[self]

    @property
    def cost(self) -> int:
        """Coins needed to buy the card."""
        return _COSTS[self]


class Phase(IntEnum):
    """Turn phases."""

    ACTION = 0
    BUY = 1
    CLEANUP = 2


NUM_TOTAL_K_CARDS = len(Card)

_NAMES = {
    Card.CURSE: "Curse",
    Card.ESTATE: "Estate",
    Card.DUCHY: "Duchy",
    Card.PROVINCE: "Province",
    Card.COPPER: "Copper",
    Card.SILVER: "Silver",
    Card.GOLD: "Gold",
    Card.ADVENTURER: "Adventurer",
    Card.COUNCIL_ROOM: "Council Room",
    Card.FEAST: "Feast",
    Card.GARDENS: "Gardens",
    Card.MINE: "Mine",
    Card.REMODEL: "Remodel",
    Card.SMITHY: "Smithy",
    Card.VILLAGE: "Village",
    Card.BARON: "Baron",
    Card.GREAT_HALL: "Great Hall",
    Card.MINION: "Minion",
    Card.STEWARD: "Steward",
    Card.TRIBUTE: "Tribute",
    Card.AMBASSADOR: "Ambassador",
    Card.CUTPURSE: "Cutpurse",
    Card.EMBARGO: "Embargo",
    Card.OUTPOST: "Outpost",
    Card.SALVAGER: "Salvager",
    Card.SEA_HAG: "Sea Hag",
    Card.TREASURE_MAP: "Treasure Map",
}

_COSTS = {
    Card.CURSE: 0,
    Card.ESTATE: 2,
    Card.DUCHY: 5,
    Card.PROVINCE: 8,
    Card.COPPER: 0,
    Card.SILVER: 3,
    Card.GOLD: 6,
    Card.ADVENTURER: 6,
    Card.COUNCIL_ROOM: 5,
    Card.FEAST: 4,
    Card.GARDENS: 4,
    Card.MINE: 5,
    Card.REMODEL: 4,
    Card.SMITHY: 4,
    Card.VILLAGE: 3,
    Card.BARON: 4,
    Card.GREAT_HALL: 3,
    Card.MINION: 5,
    Card.STEWARD: 3,
    Card.TRIBUTE: 5,
    Card.AMBASSADOR: 3,
    Card.CUTPURSE: 4,
    Card.EMBARGO: 2,
    Card.OUTPOST: 5,
    Card.SALVAGER: 4,
    Card.SEA_HAG: 4,
    Card.TREASURE_MAP: 4,
}

_PHASE_NAMES = {
    Phase.ACTION: "Action",
    Phase.BUY: "Buy",
    Phase.CLEANUP: "Cleanup",
}


def _as_card(card: int) -> Card | None:
    try:
        return Card(card)
    except ValueError:
        return None


def card_cost(card: int) -> int:
    """Cost of ``card`` in coins, or -1 for an unknown card."""
    known = _as_card(card)
    return -1 if known is None else _COSTS[known]


def display_cost(card: int) -> int:
    """Cost of ``card`` as shown to players; 1000 for an unknown card."""
    known = _as_card(card)
    return UNKNOWN_DISPLAY_COST if known is None else _COSTS[known]


def card_name(card: int) -> str:
    """Display name of ``card``, or "?" for an unknown card."""
    known = _as_card(card)
    return "?" if known is None else _NAMES[known]


def phase_name(phase: int) -> str:
    """Display name of a turn phase."""
    try:
        return _PHASE_NAMES[Phase(phase)]
    except ValueError:
        raise ValueError(f"unknown phase {phase}") from None