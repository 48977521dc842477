"""
Poker Agent - autonomous decision-making client for a remote poker game

A poker-playing agent that polls a game service and plays its own turns:
- Heuristic hand-strength evaluator (cards -> strength in [0, 1])
- Threshold strategy engine with bluffing and optional adaptive learning
- Turn controller driving both from polled table state
- FastAPI status API hosting the polling loop

Usage:
    from pokeragent.core import HandEvaluator, StrategyEngine, TurnController
    from pokeragent.agents import PokerAgent
"""

__version__ = "0.1.0"

from pokeragent.core.card import Card
from pokeragent.core.evaluator import HandEvaluator, evaluate_strength
from pokeragent.core.strategy import StrategyEngine, StrategyConfig, Action
from pokeragent.core.controller import TurnController

__all__ = [
    "Card",
    "HandEvaluator",
    "evaluate_strength",
    "StrategyEngine",
    "StrategyConfig",
    "Action",
    "TurnController",
    "__version__",
]
