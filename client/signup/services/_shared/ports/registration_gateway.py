from __future__ import annotations

import asyncio
from typing import Any, Protocol

from signup.services._shared.result import Ok, Result


class RegistrationGateway(Protocol):
    """
    Port for the remote account-creation endpoint.

    Implementations resolve to :class:`Ok` with the success payload or
    :class:`Err` with the error object. Raising is tolerated and treated as a
    rejection by the controller. Timeouts are the implementation's concern.
    """

    async def register(self, username: str, email: str, password: str) -> Result: ...


class StubRegistrationGateway(RegistrationGateway):
    """
    Deterministic gateway used in unit tests and local runs.

    :param result: Value returned on every call (default: generic success).
    :param raises: Exception raised instead of returning ``result``.
    :param gate: Optional event awaited before resolving, to hold a call in flight.
    """

    def __init__(
        self,
        result: Result | None = None,
        *,
        raises: BaseException | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.result = result if result is not None else Ok({"message": "User registered"})
        self.raises = raises
        self.gate = gate
        self.calls: list[dict[str, Any]] = []

    async def register(self, username: str, email: str, password: str) -> Result:
        self.calls.append({"username": username, "email": email, "password": password})
        if self.gate is not None:
            await self.gate.wait()
        if self.raises is not None:
            raise self.raises
        return self.result
