"""
Collaborator interfaces the turn controller depends on.

The controller never talks to the network directly. It polls a StateSource,
submits through an ActionSink and toggles readiness through a ReadySink.
GameServerClient implements all three; tests use in-memory fakes.
"""

from typing import Optional, Protocol

from pokeragent.core.rules import ActionType
from pokeragent.core.state import SharedState


class StateSource(Protocol):
    """Returns the current table snapshot or raises GameServerError."""

    async def fetch_state(self) -> SharedState:
        ...


class ActionSink(Protocol):
    """Submits one action; RAISE amounts are total bets."""

    async def submit_action(self, action_type: ActionType, amount: Optional[int] = None) -> None:
        ...


class ReadySink(Protocol):
    """Toggles this agent's ready flag between hands."""

    async def toggle_ready(self) -> None:
        ...


class IdentityProvider(Protocol):
    """Stable account id plus the credential bound to one game instance."""

    @property
    def account(self) -> str:
        ...

    @property
    def auth_token(self) -> str:
        ...
