"""
FastAPI application hosting one poker agent.

The agent's polling loop runs as a background task inside the server
process:
- startup: connect to the game service, quick-join a room, start polling
- shutdown (Ctrl+C): stop polling, let an in-flight tick finish, log the
  final statistics
"""

import logging
from typing import Optional
from fastapi import FastAPI

from pokeragent import __version__
from pokeragent.agents.poker_agent import PokerAgent
from pokeragent.config import AgentSettings
from pokeragent.server.routes import router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(agent: PokerAgent, autostart: bool = True) -> FastAPI:
    """
    Create the status application for an agent.

    Args:
        agent: The agent to host
        autostart: Connect, join and start polling on startup

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Poker Agent",
        description="Autonomous poker agent with a read-only status API",
        version=__version__,
    )
    app.state.agent = agent

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        if not autostart:
            return
        logger.info(f"{agent.name} starting up...")
        await agent.connect()
        await agent.join_game()
        agent.start()
        logger.info("Agent is now playing! Press Ctrl+C to stop.")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down agent...")
        await agent.stop()

    return app


def create_app_from_env(settings: Optional[AgentSettings] = None) -> FastAPI:
    """Factory for ``uvicorn --factory``; reads settings from the environment."""
    settings = settings or AgentSettings.from_env()
    return create_app(PokerAgent.from_settings(settings))
