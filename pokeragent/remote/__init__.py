"""
Poker Agent Remote - game service client and collaborator protocols.
"""

from pokeragent.remote.gameserver import (
    GameServerClient, GameServerError, ConnectionTimeoutError, RemoteFunctionError,
)
from pokeragent.remote.identity import StaticIdentity, generate_agent_name

__all__ = [
    "GameServerClient",
    "GameServerError",
    "ConnectionTimeoutError",
    "RemoteFunctionError",
    "StaticIdentity",
    "generate_agent_name",
]
