"""
Tests for the strategy engine: decisions, sizing, stats and adaptation.
"""

import pytest
from pydantic import ValidationError

from pokeragent.core.rules import ActionType, GamePhase
from pokeragent.core.strategy import StrategyEngine, StrategyConfig, PerformanceStats, Action


class TestStrategyConfig:
    """Tests for configuration."""

    def test_defaults(self):
        cfg = StrategyConfig()
        assert cfg.raise_threshold == 0.6
        assert cfg.call_threshold == 0.4
        assert cfg.fold_threshold == 0.3
        assert cfg.bluff_probability == 0.15
        assert cfg.aggressiveness == 0.5
        assert cfg.is_coherent

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            StrategyConfig(raise_threshold=1.5)
        with pytest.raises(ValidationError):
            StrategyConfig(bluff_probability=-0.1)

    def test_incoherent_thresholds_accepted_with_warning(self, caplog):
        """Out-of-order thresholds are legal, only logged."""
        cfg = StrategyConfig(raise_threshold=0.3, call_threshold=0.5, fold_threshold=0.4)
        assert not cfg.is_coherent
        assert "Incoherent strategy thresholds" in caplog.text

    def test_assignment_validated(self):
        cfg = StrategyConfig()
        with pytest.raises(ValidationError):
            cfg.raise_threshold = 1.5

    def test_adaptation_into_incoherence_warns(self, engine, caplog):
        """Three tightening steps push fold above call."""
        engine.record_result(False)
        for _ in range(3):
            engine.adapt_strategy()
        assert engine.config.fold_threshold == pytest.approx(0.45)
        assert not engine.config.is_coherent
        assert "Incoherent strategy thresholds" in caplog.text


class TestFreeAction:
    """Nothing owed."""

    def test_strong_hand_raises(self, engine):
        action = engine.decide(0.75, 0, 100, 1000, 0, GamePhase.FLOP)
        assert action.type == ActionType.RAISE
        # 0 + min(floor(100 * 0.5 * (1 + 0.5 * 0.75)), floor(1000 * 0.7))
        assert action.amount == 68

    def test_raise_is_total_bet(self, engine):
        action = engine.decide(0.75, 0, 100, 1000, 40, GamePhase.FLOP)
        assert action.type == ActionType.RAISE
        assert action.amount == 40 + 68

    def test_raise_never_below_current_bet(self, engine):
        for strength in (0.6, 0.8, 1.0):
            for pot in (0, 30, 500):
                action = engine.decide(strength, 0, pot, 200, 25, GamePhase.TURN)
                assert action.type == ActionType.RAISE
                assert action.amount >= 25

    def test_weak_hand_checks(self, engine):
        assert engine.decide(0.5, 0, 100, 1000, 0, GamePhase.FLOP) == Action.check()
        assert engine.decide(0.1, 0, 100, 1000, 0, GamePhase.FLOP) == Action.check()


class TestFacingBet:
    """Something owed."""

    def test_medium_hand_good_pot_odds_calls(self, engine):
        """pot=100, call=20: pot odds 0.1667, strength 0.5 -> CALL."""
        action = engine.decide(0.5, 20, 100, 1000, 20, GamePhase.FLOP)
        assert action == Action.call()

    def test_strong_hand_raises(self, engine):
        action = engine.decide(0.8, 100, 200, 1000, 100, GamePhase.TURN)
        assert action.type == ActionType.RAISE
        # 100 + floor(200 * 0.5 * (1 + 0.5 * 0.8))
        assert action.amount == 240

    def test_strong_hand_expensive_call_only_calls(self, engine):
        action = engine.decide(0.8, 600, 200, 1000, 600, GamePhase.TURN)
        assert action == Action.call()

    def test_medium_hand_cheap_call(self, engine):
        """Bad pot odds but cheap relative to stack."""
        action = engine.decide(0.45, 80, 100, 1000, 80, GamePhase.FLOP)
        assert action == Action.call()

    def test_medium_hand_bad_odds_folds(self, engine):
        action = engine.decide(0.45, 80, 100, 300, 80, GamePhase.FLOP)
        assert action == Action.fold()

    def test_weak_hand_excellent_cheap_odds_calls(self, engine):
        action = engine.decide(0.35, 10, 100, 1000, 10, GamePhase.RIVER)
        assert action == Action.call()

    def test_weak_hand_poor_odds_folds(self, engine):
        action = engine.decide(0.35, 30, 100, 1000, 30, GamePhase.RIVER)
        assert action == Action.fold()

    def test_below_fold_threshold_always_folds(self, engine):
        assert engine.decide(0.1, 10, 1000, 1000, 10, GamePhase.FLOP) == Action.fold()
        assert engine.decide(0.29, 50, 100, 1000, 50, GamePhase.FLOP) == Action.fold()


class TestRaiseSizing:
    """Bet sizing rules."""

    def test_raise_capped_by_stack(self, engine):
        action = engine.decide(1.0, 0, 1000, 100, 20, GamePhase.FLOP)
        assert action.amount == 20 + 70

    def test_sizing_uses_raw_strength(self, always_bluff):
        """A bluff decides to raise, sizing still follows the real strength."""
        engine = StrategyEngine(StrategyConfig(), rng=always_bluff)
        action = engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        assert action.type == ActionType.RAISE
        # floor(50 * (1 + 0.5 * 0.35)) = 58, not sized from 0.65
        assert action.amount == 58


class TestBluffing:
    """Randomised bluff draws."""

    def test_bluff_boosts_strength(self, always_bluff):
        engine = StrategyEngine(StrategyConfig(), rng=always_bluff)
        action = engine.decide(0.2, 20, 100, 1000, 20, GamePhase.FLOP)
        # 0.2 + 0.3 = 0.5 -> medium hand with good odds
        assert action == Action.call()

    def test_fresh_draw_every_decision(self, random_sequence):
        engine = StrategyEngine(StrategyConfig(), rng=random_sequence([0.0, 0.99]))
        first = engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        second = engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        assert first.type == ActionType.RAISE
        assert second == Action.check()

    def test_zero_bluff_probability_never_bluffs(self, always_bluff):
        engine = StrategyEngine(StrategyConfig(bluff_probability=0.0), rng=always_bluff)
        assert engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP) == Action.check()

    def test_one_draw_per_decision(self, no_bluff):
        engine = StrategyEngine(StrategyConfig(), rng=no_bluff)
        engine.decide(0.5, 0, 100, 1000, 0, GamePhase.FLOP)
        engine.decide(0.5, 10, 100, 1000, 10, GamePhase.FLOP)
        assert no_bluff.calls == 2


class TestPerformanceStats:
    """Result recording."""

    def test_empty_stats(self, engine):
        stats = engine.get_stats()
        assert stats["total_hands"] == 0
        assert stats["win_rate"] == "0%"

    def test_win_rate(self, engine):
        for won in (True, False, True, True, False):
            engine.record_result(won)
        stats = engine.get_stats()
        assert stats["wins"] == 3
        assert stats["losses"] == 2
        assert stats["total_hands"] == 5
        assert stats["win_rate"] == "60.0%"
        assert engine.stats.win_rate == pytest.approx(0.6)

    def test_bluff_outcomes(self, always_bluff):
        engine = StrategyEngine(StrategyConfig(), rng=always_bluff)
        engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        engine.record_result(True)
        engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        engine.record_result(False)
        assert engine.stats.successful_bluffs == 1
        assert engine.stats.failed_bluffs == 1

    def test_hand_without_bluff_not_counted(self, engine):
        engine.decide(0.35, 0, 100, 1000, 0, GamePhase.FLOP)
        engine.record_result(True)
        assert engine.stats.successful_bluffs == 0
        assert engine.stats.failed_bluffs == 0

    def test_stats_dataclass(self):
        stats = PerformanceStats(wins=1, losses=2, total_hands=3)
        assert stats.win_rate_display == "33.3%"


class TestAdaptiveLearning:
    """Config adaptation from the lifetime win rate."""

    def test_no_hands_leaves_config(self, engine):
        before = engine.config.model_dump()
        engine.adapt_strategy()
        assert engine.config.model_dump() == before

    def test_losing_tightens(self, engine):
        engine.record_result(False)
        engine.adapt_strategy()
        assert engine.config.raise_threshold == pytest.approx(0.65)
        assert engine.config.fold_threshold == pytest.approx(0.35)
        assert engine.config.bluff_probability == pytest.approx(0.10)
        assert engine.config.aggressiveness == 0.5

    def test_tightening_is_bounded(self, engine):
        engine.record_result(False)
        for _ in range(20):
            engine.adapt_strategy()
        assert engine.config.raise_threshold == pytest.approx(0.8)
        assert engine.config.fold_threshold == pytest.approx(0.5)
        assert engine.config.bluff_probability == pytest.approx(0.05)
        assert engine.config.raise_threshold <= 0.8
        assert engine.config.fold_threshold <= 0.5

    def test_winning_loosens(self, engine):
        engine.record_result(True)
        engine.adapt_strategy()
        assert engine.config.raise_threshold == pytest.approx(0.55)
        assert engine.config.aggressiveness == pytest.approx(0.6)

    def test_loosening_is_bounded(self, engine):
        engine.record_result(True)
        for _ in range(20):
            engine.adapt_strategy()
        assert engine.config.raise_threshold >= 0.4
        assert engine.config.raise_threshold == pytest.approx(0.4)
        assert engine.config.aggressiveness == pytest.approx(1.0)

    def test_middle_win_rate_unchanged(self, engine):
        engine.record_result(True)
        engine.record_result(False)
        before = engine.config.model_dump()
        engine.adapt_strategy()
        assert engine.config.model_dump() == before

    def test_record_does_not_adapt(self, engine):
        """Adaptation only happens when asked for."""
        engine.record_result(False)
        assert engine.config.raise_threshold == 0.6


class TestAction:
    """Tests for Action values."""

    def test_str(self):
        assert str(Action.raise_to(120)) == "RAISE $120"
        assert str(Action.fold()) == "FOLD"

    def test_frozen(self):
        with pytest.raises(Exception):
            Action.call().amount = 5
