"""
HTTP routes for watching a running agent.

Read-only: the agent plays through the game service, these routes only
report what it is doing.
"""

from typing import Dict, Any
from fastapi import APIRouter, HTTPException, Request

from pokeragent.agents.poker_agent import PokerAgent
from pokeragent.server.schemas import (
    HealthSchema, AgentStatsSchema, StrategyConfigSchema, StateSummarySchema,
)

router = APIRouter()


def get_agent(request: Request) -> PokerAgent:
    """Get the agent attached to the application."""
    agent = getattr(request.app.state, "agent", None)
    if agent is None:
        raise HTTPException(status_code=503, detail="Agent not initialized")
    return agent


@router.get("/health", response_model=HealthSchema)
async def health(request: Request) -> Dict[str, Any]:
    """Liveness plus loop status."""
    agent = get_agent(request)
    return {
        "status": "ok",
        "active": agent.is_active,
        "ticks": agent.controller.ticks,
    }


@router.get("/stats", response_model=AgentStatsSchema)
async def stats(request: Request) -> Dict[str, Any]:
    """Win/loss record and bluff counters."""
    return get_agent(request).get_stats()


@router.get("/config", response_model=StrategyConfigSchema)
async def config(request: Request) -> Dict[str, Any]:
    """
    Current strategy parameters.

    These drift over time when adaptive learning is on.
    """
    controller = get_agent(request).controller
    cfg = controller.engine.config
    return {
        **cfg.model_dump(),
        "adaptive_learning": controller.adaptive_learning,
        "coherent": cfg.is_coherent,
    }


@router.get("/state", response_model=StateSummarySchema)
async def state(request: Request) -> Dict[str, Any]:
    """Latest snapshot the agent acted on."""
    snapshot = get_agent(request).controller.state
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No state fetched yet")
    return snapshot.summary()
