"""
Pytest configuration and shared fixtures for poker agent tests.
"""

from typing import Any, Dict, List, Optional

import pytest

from pokeragent.core.card import parse_cards
from pokeragent.core.rules import ActionType
from pokeragent.core.state import SharedState
from pokeragent.core.strategy import StrategyEngine, StrategyConfig
from pokeragent.core.controller import TurnController
from pokeragent.remote.gameserver import GameServerError, RemoteFunctionError


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandom:
    """Random source that replays a fixed sequence, repeating the last value."""

    def __init__(self, values: List[float]):
        self.values = list(values)

    def random(self) -> float:
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


class FakeGameServer:
    """
    In-memory state source, action sink and ready sink.

    Snapshots are served in order; the last one repeats forever.
    """

    def __init__(self, states: Optional[List[SharedState]] = None):
        self.states = list(states or [])
        self.actions: List[tuple] = []
        self.ready_toggles = 0
        self.fetches = 0
        self.fail_fetch = False
        self.fail_actions = False

    async def fetch_state(self) -> SharedState:
        self.fetches += 1
        if self.fail_fetch or not self.states:
            raise GameServerError("unreachable")
        if len(self.states) > 1:
            return self.states.pop(0)
        return self.states[0]

    async def submit_action(self, action_type: ActionType, amount: Optional[int] = None) -> None:
        self.actions.append((action_type, amount))
        if self.fail_actions:
            raise RemoteFunctionError("action", 400, "Insufficient chips")

    async def toggle_ready(self) -> None:
        self.ready_toggles += 1


def build_state(
    status: str = "FLOP",
    my_cards: Optional[List[str]] = None,
    community: Optional[List[str]] = None,
    pot: int = 100,
    current_bet: int = 20,
    my_bet: int = 0,
    chips: int = 1000,
    turn: int = 0,
    folded: bool = False,
    all_in: bool = False,
    ready: bool = True,
    winner_info: Optional[str] = None,
    seated: bool = True,
) -> SharedState:
    """Heads-up snapshot from the point of view of account 'me'."""
    players: Dict[str, Dict[str, Any]] = {
        "opp": {
            "account": "opp",
            "chips": 900,
            "bet": current_bet,
            "totalBet": current_bet,
            "holeCards": ["??", "??"],
            "role": "SB",
            "active": True,
            "ready": True,
        },
    }
    if seated:
        players["me"] = {
            "account": "me",
            "chips": chips,
            "bet": my_bet,
            "totalBet": my_bet,
            "holeCards": my_cards if my_cards is not None else ["As", "Ah"],
            "folded": folded,
            "allIn": all_in,
            "role": "BB",
            "active": True,
            "disconnected": False,
            "ready": ready,
        }
    return SharedState.model_validate({
        "status": status,
        "players": players,
        "seats": ["me", "opp"],
        "dealerIndex": 1,
        "currentTurn": turn,
        "pot": pot,
        "communityCards": community or [],
        "currentBet": current_bet,
        "minRaise": 20,
        "actionLog": [],
        "winnerInfo": winner_info,
        "myAccount": "me",
    })


@pytest.fixture
def make_state():
    """Factory for SharedState snapshots."""
    return build_state


@pytest.fixture
def cards():
    """Parse card strings: cards("As", "10h")."""
    return lambda *names: parse_cards(names)


@pytest.fixture
def no_bluff():
    """Random source that never triggers a bluff."""
    return FixedRandom(0.99)


@pytest.fixture
def always_bluff():
    """Random source that always triggers a bluff."""
    return FixedRandom(0.0)


@pytest.fixture
def random_sequence():
    """Factory for random sources replaying given values."""
    return SequenceRandom


@pytest.fixture
def engine(no_bluff):
    """Strategy engine with the default config and no bluffing."""
    return StrategyEngine(StrategyConfig(), rng=no_bluff)


@pytest.fixture
def server():
    """Empty fake game server."""
    return FakeGameServer()


@pytest.fixture
def controller(server, engine):
    """Turn controller wired to the fake server."""
    return TurnController(
        state_source=server,
        action_sink=server,
        ready_sink=server,
        engine=engine,
        poll_interval=0.01,
        name="test-agent",
    )
