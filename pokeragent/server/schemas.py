"""
Pydantic schemas for the agent status API.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class HealthSchema(BaseModel):
    """Liveness of the agent process."""
    status: str = "ok"
    active: bool
    ticks: int


class PerformanceStatsSchema(BaseModel):
    """Cumulative hand results."""
    wins: int
    losses: int
    total_hands: int
    successful_bluffs: int
    failed_bluffs: int
    win_rate: str = Field(..., description="Display form, e.g. '60.0%'")


class AgentStatsSchema(BaseModel):
    """Agent identity plus performance."""
    name: str
    account: str
    strategy: PerformanceStatsSchema
    active: bool


class StrategyConfigSchema(BaseModel):
    """Current decision policy parameters."""
    raise_threshold: float
    call_threshold: float
    fold_threshold: float
    bluff_probability: float
    aggressiveness: float
    adaptive_learning: bool
    coherent: bool


class StateSummarySchema(BaseModel):
    """Latest table snapshot, as seen by the agent."""
    phase: str
    pot: int
    current_bet: int
    min_raise: int
    community_cards: List[str]
    seats: List[str]
    turn: Optional[str] = None
    my_account: str
    my_chips: Optional[int] = None
    my_cards: List[str] = []
    winner_info: Optional[str] = None
