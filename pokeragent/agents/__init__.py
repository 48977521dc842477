"""
Poker Agent Agents - lifecycle wrapper around the turn controller.
"""

from pokeragent.agents.poker_agent import PokerAgent

__all__ = ["PokerAgent"]
