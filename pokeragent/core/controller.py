"""
Turn Controller - the polling state machine that plays the agent's turns.

Each tick:
1. Fetch a fresh SharedState snapshot (skip the tick if that fails)
2. WAITING / SHOWDOWN: record the hand result once, then toggle ready
3. PREFLOP / FLOP / TURN / RIVER: if it is this agent's turn, evaluate the
   hand, ask the strategy engine for an action and submit it

The phase always comes from the game service; the controller keeps no
timers of its own besides the poll interval. Ticks never overlap.

Usage:
    controller = TurnController(state_source=client, action_sink=client,
                                ready_sink=client)
    task = asyncio.create_task(controller.run())
    ...
    controller.stop()
    await task
"""

from __future__ import annotations
from typing import Optional
import asyncio
import logging

from pokeragent.core.card import format_cards
from pokeragent.core.evaluator import HandEvaluator
from pokeragent.core.rules import GamePhase, ActionType, DEFAULT_POLL_INTERVAL
from pokeragent.core.state import SharedState, Participant
from pokeragent.core.strategy import StrategyEngine, Action
from pokeragent.remote.gameserver import GameServerError
from pokeragent.remote.interfaces import StateSource, ActionSink, ReadySink


logger = logging.getLogger(__name__)


class TurnController:
    """
    Drives HandEvaluator and StrategyEngine from polled game state.

    Attributes:
        state: Latest snapshot, None until the first successful fetch
        engine: Strategy engine owned by this controller
        evaluator: Hand evaluator
        poll_interval: Seconds between ticks
        adaptive_learning: Run StrategyEngine.adapt_strategy after each
            recorded hand
    """

    def __init__(
        self,
        state_source: StateSource,
        action_sink: ActionSink,
        ready_sink: ReadySink,
        engine: Optional[StrategyEngine] = None,
        evaluator: Optional[HandEvaluator] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        adaptive_learning: bool = False,
        name: str = "agent",
    ):
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

        self.state_source = state_source
        self.action_sink = action_sink
        self.ready_sink = ready_sink
        self.engine = engine or StrategyEngine()
        self.evaluator = evaluator or HandEvaluator()
        self.poll_interval = poll_interval
        self.adaptive_learning = adaptive_learning
        self.name = name

        self.state: Optional[SharedState] = None
        self.ticks = 0
        # winner_info of the showdown last recorded, cleared on the next other phase
        self._recorded_winner: Optional[str] = None
        self._stop_event = asyncio.Event()
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def refresh_state(self) -> bool:
        """
        Replace the held snapshot with a fresh one.

        Returns:
            True if the fetch succeeded
        """
        try:
            self.state = await self.state_source.fetch_state()
        except GameServerError as e:
            logger.debug(f"State fetch failed, skipping tick: {e}")
            return False
        return True

    async def tick(self) -> Optional[Action]:
        """
        Run one poll cycle.

        Returns:
            The action submitted this tick, or None
        """
        self.ticks += 1
        if not await self.refresh_state():
            return None

        state = self.state
        if state is None:
            return None

        if state.status in (GamePhase.WAITING, GamePhase.SHOWDOWN):
            await self._between_hands(state)
            return None

        self._recorded_winner = None
        return await self._play_turn(state)

    async def _between_hands(self, state: SharedState) -> None:
        """Record the showdown result and get ready for the next hand."""
        if state.status == GamePhase.SHOWDOWN:
            if state.winner_info and state.winner_info != self._recorded_winner:
                self._record_showdown(state)
        else:
            self._recorded_winner = None

        me = state.me
        if me is not None and not me.ready:
            try:
                await self.ready_sink.toggle_ready()
            except GameServerError as e:
                logger.error(f"Ready toggle failed: {e}")
                return
            logger.info(f"{self.name} ready")
            await self.refresh_state()

    def _record_showdown(self, state: SharedState) -> None:
        won = state.i_won
        self.engine.record_result(won)
        self._recorded_winner = state.winner_info

        if won:
            logger.info(f"{self.name} WON!")
        else:
            logger.info(f"{self.name} lost")

        if self.adaptive_learning:
            self.engine.adapt_strategy()

        stats = self.engine.get_stats()
        logger.info(
            f"Record: {stats['wins']}W-{stats['losses']}L "
            f"({stats['total_hands']} hands, {stats['win_rate']} win rate)"
        )

    async def _play_turn(self, state: SharedState) -> Optional[Action]:
        """Decide and submit if this agent holds the turn."""
        if not state.is_my_turn:
            return None

        me = state.me
        if me is None or not me.can_act:
            return None

        call_amount = state.call_amount_for(me)

        if me.has_hidden_cards:
            logger.warning("Can't see own cards, checking/folding")
            action = Action.check() if call_amount == 0 else Action.fold()
            return await self._submit(action)

        action = self._decide(state, me, call_amount)
        return await self._submit(action)

    def _decide(self, state: SharedState, me: Participant, call_amount: int) -> Action:
        hand_strength = self.evaluator.evaluate(me.hole_cards, state.community_cards)

        logger.info(f"{self.name} thinking...")
        logger.info(f"Phase: {state.status.value} | Pot: ${state.pot} | To call: ${call_amount}")
        logger.info(
            f"Cards: {format_cards(me.hole_cards)} | "
            f"Community: {format_cards(state.community_cards)} | "
            f"{self.evaluator.describe(me.hole_cards, state.community_cards)}"
        )

        return self.engine.decide(
            hand_strength,
            call_amount,
            state.pot,
            me.chips,
            state.current_bet,
            state.status,
        )

    async def _submit(self, action: Action) -> Optional[Action]:
        """
        Send one action. Failures are logged and not retried this tick.

        Returns:
            The action if the sink accepted it, else None
        """
        if action.type == ActionType.RAISE and action.amount:
            args = (action.type, action.amount)
        else:
            args = (action.type,)

        try:
            await self.action_sink.submit_action(*args)
        except GameServerError as e:
            logger.error(f"Action failed: {action}: {e}")
            return None

        logger.info(f"-> {action}")
        return action

    async def run(self) -> None:
        """
        Poll until stop() is called.

        A tick already in progress when stop() is called runs to completion.
        Unexpected errors in a tick are logged and the loop keeps going.
        """
        self._running = True
        logger.info(f"{self.name} starting game loop")

        try:
            while not self._stop_event.is_set():
                try:
                    await self.tick()
                except Exception:
                    logger.exception("Unexpected error during tick")

                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=self.poll_interval)
                except asyncio.TimeoutError:
                    pass
        finally:
            self._running = False
            self._stop_event = asyncio.Event()
            logger.info(f"{self.name} stopped")

    def stop(self) -> None:
        """Ask the loop to exit after the current tick."""
        self._stop_event.set()
