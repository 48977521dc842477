"""
PokerAgent - one autonomous player attached to a game service.

Wires a GameServerClient to a TurnController and manages the lifecycle:
connect, join a room, run the polling loop, stop and report statistics.

Usage:
    agent = PokerAgent.from_settings(settings)
    await agent.connect()
    await agent.join_game()
    agent.start()
    ...
    await agent.stop()
"""

from __future__ import annotations
from typing import Dict, Any, Optional
import asyncio
import logging

from pokeragent.config import AgentSettings
from pokeragent.core.controller import TurnController
from pokeragent.core.strategy import StrategyEngine
from pokeragent.remote.gameserver import GameServerClient
from pokeragent.remote.identity import StaticIdentity


logger = logging.getLogger(__name__)


class PokerAgent:
    """
    Lifecycle wrapper around a TurnController.

    Attributes:
        name: Display name used in logs
        client: Game service client
        controller: Turn controller driving the decisions
        room_id: Room joined via quick join, if any
    """

    def __init__(self, name: str, client: GameServerClient, controller: TurnController):
        self.name = name
        self.client = client
        self.controller = controller
        self.room_id: Optional[str] = None
        self._task: Optional[asyncio.Task] = None
        self._connected = False

        logger.info(f"Agent: {name}")
        logger.info(f"Account: {client.account}")

    @classmethod
    def from_settings(cls, settings: AgentSettings) -> PokerAgent:
        """Build client, engine and controller from settings."""
        name = settings.resolved_name
        identity = StaticIdentity(account=settings.account, auth_token=settings.auth_token)
        client = GameServerClient(
            settings.server_url,
            settings.verse,
            identity,
            timeout=settings.connect_timeout,
        )
        engine = StrategyEngine(settings.strategy.model_copy())
        controller = TurnController(
            state_source=client,
            action_sink=client,
            ready_sink=client,
            engine=engine,
            poll_interval=settings.poll_interval,
            adaptive_learning=settings.adaptive_learning,
            name=name,
        )
        return cls(name, client, controller)

    @property
    def is_active(self) -> bool:
        """True while connected and the polling loop is alive."""
        return self._connected and self._task is not None and not self._task.done()

    async def connect(self) -> None:
        """Connect to the game service; errors propagate to the caller."""
        try:
            await self.client.connect()
        except Exception as e:
            logger.error(f"Connection failed: {e}")
            raise
        self._connected = True
        logger.info(f"{self.name} connected to game server")

    async def join_game(self) -> str:
        """Quick-join a room and take an initial state snapshot."""
        self.room_id = await self.client.quick_join()
        logger.info(f"{self.name} joined room: {self.room_id}")
        await self.controller.refresh_state()
        return self.room_id

    def start(self) -> None:
        """Start the polling loop as a background task."""
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self.controller.run())

    async def stop(self) -> None:
        """
        Stop polling, let an in-flight tick finish, close the client
        and log the final statistics.
        """
        if self._task is not None:
            self.controller.stop()
            await self._task
            self._task = None
        self._connected = False
        await self.client.aclose()

        logger.info(f"{self.name} stopped")
        logger.info(f"Final statistics: {self.get_stats()}")

    def get_stats(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "account": self.client.account,
            "strategy": self.controller.engine.get_stats(),
            "active": self.is_active,
        }
