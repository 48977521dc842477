"""
Agent configuration.

Settings come from the command line, with environment variables as
defaults (see run.py):

    VERSE / AGENT8_VERSE   target game instance (required)
    NAME / AGENT_NAME      agent display name
    ACCOUNT                account id, defaults to the agent name
    AUTH_TOKEN             signed credential for the game instance
    SERVER_URL             game service root URL
"""

from __future__ import annotations
from typing import Mapping, Optional
import os

from pydantic import BaseModel, Field, model_validator

from pokeragent.core.rules import DEFAULT_POLL_INTERVAL, DEFAULT_CONNECT_TIMEOUT
from pokeragent.core.strategy import StrategyConfig
from pokeragent.remote.identity import generate_agent_name


DEFAULT_SERVER_URL = "http://localhost:8080"


class AgentSettings(BaseModel):
    """Everything needed to start one agent."""
    verse: str = Field(..., min_length=1)
    name: Optional[str] = None
    account: Optional[str] = None
    auth_token: str = ""
    server_url: str = DEFAULT_SERVER_URL
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL, gt=0)
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    adaptive_learning: bool = False
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)

    @model_validator(mode="after")
    def _fill_identity(self) -> AgentSettings:
        # Name once, so every component sees the same one
        if not self.name:
            self.name = generate_agent_name()
        if not self.account:
            self.account = self.name
        return self

    @property
    def resolved_name(self) -> str:
        return self.name or ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> AgentSettings:
        """
        Build settings from environment variables.

        Keyword overrides that are not None win over the environment.
        """
        env = os.environ if environ is None else environ
        values = {
            "verse": env.get("VERSE") or env.get("AGENT8_VERSE") or "",
            "name": env.get("NAME") or env.get("AGENT_NAME"),
            "account": env.get("ACCOUNT"),
            "auth_token": env.get("AUTH_TOKEN", ""),
            "server_url": env.get("SERVER_URL", DEFAULT_SERVER_URL),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
