"""
Game phases, action types and the fixed numbers of the decision policy.

The remote game authority owns the actual rules of play. This module only
names the phases and actions the agent sees on the wire, plus the constants
the evaluator and strategy engine are tuned around:

1. Hand strength is a scalar in [0, 1]. Made-hand categories map to fixed
   bands (quads 0.95 down to weak high card 0.30), draws add a bonus.

2. The decision policy compares strength against three thresholds and
   weighs pot odds and stack-relative cost before committing chips.

3. Raises are expressed as the total target bet, never as an increment.
"""

from enum import Enum


class GamePhase(Enum):
    """Phases of a hand as reported by the game service."""
    WAITING = "WAITING"      # Between hands, players toggle ready
    PREFLOP = "PREFLOP"      # Hole cards dealt
    FLOP = "FLOP"            # 3 community cards
    TURN = "TURN"            # 4th community card
    RIVER = "RIVER"          # 5th community card
    SHOWDOWN = "SHOWDOWN"    # Winner determined

    @property
    def is_betting_street(self) -> bool:
        """True for the four phases in which players act."""
        return self in BETTING_STREETS


BETTING_STREETS = frozenset({
    GamePhase.PREFLOP,
    GamePhase.FLOP,
    GamePhase.TURN,
    GamePhase.RIVER,
})


class ActionType(Enum):
    """Actions accepted by the game service."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


class SeatRole(Enum):
    """Role marker on a seat for the current hand."""
    SMALL_BLIND = "SB"
    BIG_BLIND = "BB"
    DEALER = "D"
    NONE = ""


# Hand strength bands
MIN_VISIBLE_CARDS = 2
DEFAULT_STRENGTH = 0.3
FOUR_OF_A_KIND_STRENGTH = 0.95
FULL_HOUSE_STRENGTH = 0.90
FLUSH_STRENGTH = 0.85
STRAIGHT_STRENGTH = 0.80
THREE_OF_A_KIND_STRENGTH = 0.70
TWO_PAIR_STRENGTH = 0.60
HIGH_PAIR_STRENGTH = 0.55
LOW_PAIR_STRENGTH = 0.45
STRONG_HIGH_CARD_STRENGTH = 0.40
WEAK_HIGH_CARD_STRENGTH = 0.30
FLUSH_DRAW_BONUS = 0.15
STRAIGHT_DRAW_BONUS = 0.10
MAX_STRENGTH = 1.0

# Decision policy
BLUFF_STRENGTH_BOOST = 0.3
RAISE_MAX_CALL_FRACTION = 0.5      # of chips, above this a strong hand only calls
MEDIUM_MAX_POT_ODDS = 0.4
MEDIUM_CHEAP_CALL_FRACTION = 0.2   # of chips
WEAK_MAX_POT_ODDS = 0.2
WEAK_CHEAP_CALL_FRACTION = 0.1     # of chips

# Raise sizing
BASE_BET_POT_FRACTION = 0.5
MAX_RAISE_CHIP_FRACTION = 0.7

# Adaptive learning
TIGHTEN_BELOW_WIN_RATE = 0.3
LOOSEN_ABOVE_WIN_RATE = 0.7
NEUTRAL_WIN_RATE = 0.5
THRESHOLD_STEP = 0.05
BLUFF_STEP = 0.05
AGGRESSION_STEP = 0.1
MAX_RAISE_THRESHOLD = 0.8
MAX_FOLD_THRESHOLD = 0.5
MIN_BLUFF_PROBABILITY = 0.05
MIN_RAISE_THRESHOLD = 0.4
MAX_AGGRESSIVENESS = 1.0

# Polling
DEFAULT_POLL_INTERVAL = 2.0     # seconds
DEFAULT_CONNECT_TIMEOUT = 10.0  # seconds
