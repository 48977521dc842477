"""
Poker Agent Core - evaluation, strategy and the turn state machine.

Nothing in here opens a connection; the controller talks to the game
service only through the collaborator protocols in pokeragent.remote.
"""

from pokeragent.core.card import Card, Rank, Suit
from pokeragent.core.rules import GamePhase, ActionType, SeatRole
from pokeragent.core.evaluator import HandEvaluator, HandCategory, evaluate_strength
from pokeragent.core.state import Participant, SharedState
from pokeragent.core.strategy import StrategyEngine, StrategyConfig, PerformanceStats, Action
from pokeragent.core.controller import TurnController

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "GamePhase",
    "ActionType",
    "SeatRole",
    "HandEvaluator",
    "HandCategory",
    "evaluate_strength",
    "Participant",
    "SharedState",
    "StrategyEngine",
    "StrategyConfig",
    "PerformanceStats",
    "Action",
    "TurnController",
]
