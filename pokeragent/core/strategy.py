"""
Strategy Engine - turns hand strength and pot economics into an action.

The engine owns two pieces of state:
- StrategyConfig: the five tunable parameters of the decision policy
- PerformanceStats: win/loss counters accumulated over the process lifetime

Both belong to one engine instance. Nothing here is shared between agents.

Usage:
    engine = StrategyEngine(StrategyConfig(raise_threshold=0.65))
    action = engine.decide(0.72, call_amount=20, pot=100, chips=980,
                           current_bet=40, phase=GamePhase.FLOP)
    ...
    engine.record_result(won=True)
    engine.adapt_strategy()   # optional
"""

from __future__ import annotations
from typing import Dict, Any, Optional, Protocol
from dataclasses import dataclass
import logging
import math
import random

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pokeragent.core.rules import (
    GamePhase, ActionType,
    BLUFF_STRENGTH_BOOST, MAX_STRENGTH,
    RAISE_MAX_CALL_FRACTION, MEDIUM_MAX_POT_ODDS, MEDIUM_CHEAP_CALL_FRACTION,
    WEAK_MAX_POT_ODDS, WEAK_CHEAP_CALL_FRACTION,
    BASE_BET_POT_FRACTION, MAX_RAISE_CHIP_FRACTION,
    TIGHTEN_BELOW_WIN_RATE, LOOSEN_ABOVE_WIN_RATE, NEUTRAL_WIN_RATE,
    THRESHOLD_STEP, BLUFF_STEP, AGGRESSION_STEP,
    MAX_RAISE_THRESHOLD, MAX_FOLD_THRESHOLD, MIN_BLUFF_PROBABILITY,
    MIN_RAISE_THRESHOLD, MAX_AGGRESSIVENESS,
)


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1), e.g. random.Random."""

    def random(self) -> float:
        ...


class StrategyConfig(BaseModel):
    """
    Tunable parameters of the decision policy.

    Attributes:
        raise_threshold: Strength needed to raise (higher = tighter)
        call_threshold: Strength needed to call
        fold_threshold: Strength below which the agent always folds
        bluff_probability: Chance per decision of playing a boosted strength
        aggressiveness: Bet sizing multiplier weight

    A coherent config keeps raise >= call >= fold. Other orderings are
    accepted and only produce a warning, also when adaptation mutates the
    config in place.
    """
    model_config = ConfigDict(validate_assignment=True)

    raise_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    call_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    fold_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    bluff_probability: float = Field(default=0.15, ge=0.0, le=1.0)
    aggressiveness: float = Field(default=0.5, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _warn_on_incoherent_thresholds(self) -> StrategyConfig:
        if not self.is_coherent:
            logger.warning(
                "Incoherent strategy thresholds: raise=%.2f call=%.2f fold=%.2f "
                "(expected raise >= call >= fold)",
                self.raise_threshold, self.call_threshold, self.fold_threshold,
            )
        return self

    @property
    def is_coherent(self) -> bool:
        """True when raise >= call >= fold."""
        return self.raise_threshold >= self.call_threshold >= self.fold_threshold


@dataclass
class PerformanceStats:
    """Hand results accumulated since process start."""
    wins: int = 0
    losses: int = 0
    total_hands: int = 0
    successful_bluffs: int = 0
    failed_bluffs: int = 0

    @property
    def win_rate(self) -> float:
        """Fraction of hands won, 0.0 when no hands were played."""
        if self.total_hands == 0:
            return 0.0
        return self.wins / self.total_hands

    @property
    def win_rate_display(self) -> str:
        """Win rate like '60.0%', or '0%' before the first hand."""
        if self.total_hands == 0:
            return "0%"
        return f"{self.win_rate * 100:.1f}%"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wins": self.wins,
            "losses": self.losses,
            "total_hands": self.total_hands,
            "successful_bluffs": self.successful_bluffs,
            "failed_bluffs": self.failed_bluffs,
            "win_rate": self.win_rate_display,
        }


@dataclass(frozen=True)
class Action:
    """
    A decision to submit.

    For RAISE, ``amount`` is the total target bet for this street,
    not the increment over the current bet.
    """
    type: ActionType
    amount: Optional[int] = None

    @classmethod
    def fold(cls) -> Action:
        return cls(ActionType.FOLD)

    @classmethod
    def check(cls) -> Action:
        return cls(ActionType.CHECK)

    @classmethod
    def call(cls) -> Action:
        return cls(ActionType.CALL)

    @classmethod
    def raise_to(cls, total: int) -> Action:
        return cls(ActionType.RAISE, total)

    def __str__(self) -> str:
        if self.amount:
            return f"{self.type.value} ${self.amount}"
        return self.type.value


class StrategyEngine:
    """
    Threshold-based poker policy with optional bluffing and adaptation.

    Args:
        config: Strategy parameters, defaults to a balanced config
        rng: Random source for bluff draws, defaults to a private
            random.Random so tests can inject a deterministic one
    """

    def __init__(
        self,
        config: Optional[StrategyConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config or StrategyConfig()
        self.stats = PerformanceStats()
        self._rng: RandomSource = rng or random.Random()
        # Set when any decision since the last recorded hand was a bluff
        self._bluffed_this_hand = False

    def decide(
        self,
        hand_strength: float,
        call_amount: int,
        pot: int,
        chips: int,
        current_bet: int,
        phase: Optional[GamePhase] = None,
    ) -> Action:
        """
        Choose an action.

        Args:
            hand_strength: Evaluator output in [0, 1]
            call_amount: Chips owed to stay in the hand (0 = free action)
            pot: Current pot size
            chips: Agent's remaining stack
            current_bet: Highest bet on this street
            phase: Current street; accepted for richer policies, unused here

        Returns:
            The chosen Action; RAISE carries a total-bet amount
        """
        pot_odds = call_amount / (pot + call_amount) if call_amount > 0 else 0.0

        # Fresh draw on every decision
        bluffing = self._rng.random() < self.config.bluff_probability
        if bluffing:
            effective = min(hand_strength + BLUFF_STRENGTH_BOOST, MAX_STRENGTH)
            self._bluffed_this_hand = True
        else:
            effective = hand_strength

        logger.info(
            f"Hand: {hand_strength * 100:.0f}% | Effective: {effective * 100:.0f}% "
            f"| Bluff: {bluffing} | Pot odds: {pot_odds:.3f}"
        )

        cfg = self.config

        # Free action
        if call_amount == 0:
            if effective >= cfg.raise_threshold:
                return Action.raise_to(self._raise_total(pot, chips, hand_strength, current_bet))
            return Action.check()

        # Strong hand: raise unless the call alone is a big share of the stack
        if effective >= cfg.raise_threshold:
            if call_amount < chips * RAISE_MAX_CALL_FRACTION:
                return Action.raise_to(self._raise_total(pot, chips, hand_strength, current_bet))
            return Action.call()

        # Medium hand: good pot odds or a cheap call
        if effective >= cfg.call_threshold:
            if pot_odds < MEDIUM_MAX_POT_ODDS or call_amount < chips * MEDIUM_CHEAP_CALL_FRACTION:
                return Action.call()
            return Action.fold()

        # Weak hand: only excellent odds on a very cheap call
        if effective >= cfg.fold_threshold:
            if pot_odds < WEAK_MAX_POT_ODDS and call_amount < chips * WEAK_CHEAP_CALL_FRACTION:
                return Action.call()
            return Action.fold()

        return Action.fold()

    def _raise_total(self, pot: int, chips: int, hand_strength: float, current_bet: int) -> int:
        """
        Total bet for a raise.

        Sized from the raw strength, so a bluff decides whether to raise but
        not how much. The part above the current bet never exceeds 70% of the
        stack.
        """
        base_bet = pot * BASE_BET_POT_FRACTION
        multiplier = 1 + self.config.aggressiveness * hand_strength
        raise_amount = math.floor(base_bet * multiplier)
        max_bet = math.floor(chips * MAX_RAISE_CHIP_FRACTION)
        return current_bet + min(raise_amount, max_bet)

    def record_result(self, won: bool) -> None:
        """
        Record the outcome of one finished hand.

        Call exactly once per observed showdown. A hand in which any decision
        was a bluff also counts as a successful or failed bluff.
        """
        self.stats.total_hands += 1
        if won:
            self.stats.wins += 1
        else:
            self.stats.losses += 1

        if self._bluffed_this_hand:
            if won:
                self.stats.successful_bluffs += 1
            else:
                self.stats.failed_bluffs += 1
            self._bluffed_this_hand = False

    def adapt_strategy(self) -> None:
        """
        Nudge the config according to the lifetime win rate.

        Below 30% the engine tightens, above 70% it loosens, in between
        nothing changes. With no hands recorded the rate counts as 50%.
        """
        stats = self.stats
        win_rate = stats.wins / stats.total_hands if stats.total_hands > 0 else NEUTRAL_WIN_RATE
        cfg = self.config

        if win_rate < TIGHTEN_BELOW_WIN_RATE:
            cfg.raise_threshold = min(cfg.raise_threshold + THRESHOLD_STEP, MAX_RAISE_THRESHOLD)
            cfg.fold_threshold = min(cfg.fold_threshold + THRESHOLD_STEP, MAX_FOLD_THRESHOLD)
            cfg.bluff_probability = max(cfg.bluff_probability - BLUFF_STEP, MIN_BLUFF_PROBABILITY)
            logger.info("Adapting: playing tighter")
        elif win_rate > LOOSEN_ABOVE_WIN_RATE:
            cfg.raise_threshold = max(cfg.raise_threshold - THRESHOLD_STEP, MIN_RAISE_THRESHOLD)
            cfg.aggressiveness = min(cfg.aggressiveness + AGGRESSION_STEP, MAX_AGGRESSIVENESS)
            logger.info("Adapting: playing more aggressive")

    def get_stats(self) -> Dict[str, Any]:
        """Counters plus the win rate display string."""
        return self.stats.to_dict()
