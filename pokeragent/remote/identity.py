"""
Agent identity.

Key management and token signing happen outside this package; the agent is
handed an account id and an already signed auth token.
"""

from dataclasses import dataclass
import secrets


@dataclass(frozen=True)
class StaticIdentity:
    """
    Identity with a fixed account and credential.

    Attributes:
        account: Account id as it appears in SharedState.players
        auth_token: Signed credential for the target game instance
    """
    account: str
    auth_token: str = ""

    def __repr__(self) -> str:
        # Keep tokens out of logs
        return f"StaticIdentity(account={self.account!r})"


def generate_agent_name() -> str:
    """Random name like 'poker-agent-3f9a1c' for unnamed agents."""
    return f"poker-agent-{secrets.token_hex(3)}"
