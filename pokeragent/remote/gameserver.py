"""
HTTP client for the remote game service.

The service exposes named remote functions. Each call is a POST:

    POST {base_url}/verses/{verse}/remote/{name}
    Authorization: <auth token>
    {"account": "0xabc", "args": [...]}

    200 {"result": ...}
    4xx/5xx {"error": "..."} or {"detail": "..."}

Remote functions used by the agent:
- getPublicState: current SharedState snapshot
- action: [type, amount] submit one action
- toggleReady: flip the ready flag
- quickJoin: join any open room, returns the room id
"""

from __future__ import annotations
from typing import Any, Optional, Sequence
import asyncio
import logging

import httpx
from pydantic import ValidationError

from pokeragent.core.rules import ActionType, DEFAULT_CONNECT_TIMEOUT
from pokeragent.core.state import SharedState
from pokeragent.remote.interfaces import IdentityProvider


logger = logging.getLogger(__name__)


class GameServerError(Exception):
    """Base error for anything that goes wrong talking to the game service."""


class ConnectionTimeoutError(GameServerError):
    """The service did not answer the readiness probe in time."""


class RemoteFunctionError(GameServerError):
    """
    The service answered a remote call with an error.

    Attributes:
        function: Remote function name
        status_code: HTTP status of the response
    """

    def __init__(self, function: str, status_code: int, message: str):
        super().__init__(f"{function} failed ({status_code}): {message}")
        self.function = function
        self.status_code = status_code
        self.message = message


class GameServerClient:
    """
    Remote-function client implementing StateSource, ActionSink and ReadySink.

    Usage:
        client = GameServerClient("https://game.example", verse, identity)
        await client.connect()
        room_id = await client.quick_join()
        state = await client.fetch_state()
        await client.submit_action(ActionType.RAISE, 120)
        await client.aclose()
    """

    def __init__(
        self,
        base_url: str,
        verse: str,
        identity: IdentityProvider,
        timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Root URL of the game service
            verse: Target game instance id
            identity: Supplies the account id and auth token
            timeout: Seconds allowed for connect and for each request
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.verse = verse
        self.identity = identity
        self.timeout = timeout
        headers = {}
        if identity.auth_token:
            headers["Authorization"] = identity.auth_token
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def account(self) -> str:
        return self.identity.account

    async def connect(self) -> None:
        """
        Wait for the service to report ready.

        Raises:
            ConnectionTimeoutError: No answer within ``timeout`` seconds
            GameServerError: The service answered but is not ready
        """
        try:
            response = await asyncio.wait_for(
                self._http.get(f"/verses/{self.verse}/health"),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ConnectionTimeoutError(f"Connection timeout ({self.timeout:g}s)") from e
        except httpx.HTTPError as e:
            raise GameServerError(f"Connection failed: {e}") from e

        if response.status_code != 200 or not _json_body(response, "health").get("ready", False):
            raise GameServerError("Server not ready")

        logger.info(f"Connected to {self._http.base_url} as {self.account}")

    async def remote_function(self, name: str, args: Sequence[Any] = ()) -> Any:
        """
        Call a named remote function and return its ``result``.

        Raises:
            RemoteFunctionError: The service rejected the call
            GameServerError: Transport failure
        """
        payload = {"account": self.account, "args": list(args)}
        try:
            response = await self._http.post(f"/verses/{self.verse}/remote/{name}", json=payload)
        except httpx.HTTPError as e:
            raise GameServerError(f"{name}: {e}") from e

        if response.is_error:
            raise RemoteFunctionError(name, response.status_code, _error_message(response))

        return _json_body(response, name).get("result")

    async def fetch_state(self) -> SharedState:
        """Fetch and parse the public state snapshot."""
        raw = await self.remote_function("getPublicState")
        if raw is None:
            raise GameServerError("getPublicState returned no state")
        try:
            return SharedState.model_validate(raw)
        except ValidationError as e:
            raise GameServerError(f"Malformed state snapshot: {e}") from e

    async def submit_action(self, action_type: ActionType, amount: Optional[int] = None) -> None:
        """Submit an action; ``amount`` is the total bet for RAISE."""
        args: list = [action_type.value]
        if amount is not None:
            args.append(amount)
        await self.remote_function("action", args)

    async def toggle_ready(self) -> None:
        await self.remote_function("toggleReady")

    async def quick_join(self) -> str:
        """Join any open room and return its id."""
        return str(await self.remote_function("quickJoin"))

    async def aclose(self) -> None:
        await self._http.aclose()


def _json_body(response: httpx.Response, name: str) -> dict:
    """Decode a success body, which must be a JSON object."""
    try:
        body = response.json()
    except ValueError as e:
        raise GameServerError(f"{name}: malformed response ({response.status_code})") from e
    if not isinstance(body, dict):
        raise GameServerError(f"{name}: malformed response, expected an object")
    return body


def _error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body)
    return str(body)
