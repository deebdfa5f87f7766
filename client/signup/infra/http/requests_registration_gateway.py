from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

import requests

from signup.schemas.registration import SignupRequestSchema
from signup.services._shared.ports.registration_gateway import RegistrationGateway
from signup.services._shared.result import Err, Ok, Result

log = logging.getLogger(__name__)

_request_schema = SignupRequestSchema()


class RequestsRegistrationGateway(RegistrationGateway):
    """
    HTTP adapter posting the sign-up form to the account-creation endpoint.

    The blocking ``requests`` call runs in a worker thread so the event loop
    stays responsive while the attempt is in flight.

    :param url: Absolute URL of the sign-up endpoint.
    :param timeout: Seconds before the request is abandoned.
    :param session_factory: Builds the session for one attempt. Each attempt
        runs in its own worker thread and gets its own session, closed when
        the request completes.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session_factory = session_factory

    async def register(self, username: str, email: str, password: str) -> Result:
        body = _request_schema.dump(
            {"username": username, "email": email, "password": password}
        )
        return await asyncio.to_thread(self._post, body)

    def _post(self, body: dict[str, Any]) -> Result:
        started = time.perf_counter()
        try:
            with self.session_factory() as session:
                resp = session.post(self.url, json=body, timeout=self.timeout)
                resp.raise_for_status()
        except requests.RequestException as exc:
            log.warning(
                "signup.http_failed url=%s error=%s",
                self.url,
                type(exc).__name__,
                extra={"endpoint": self.url, "elapsed_ms": _elapsed_ms(started)},
            )
            return Err(exc)
        log.info(
            "signup.http_ok url=%s status=%s",
            self.url,
            resp.status_code,
            extra={"endpoint": self.url, "elapsed_ms": _elapsed_ms(started)},
        )
        return Ok(_json_or_empty(resp))


def _json_or_empty(resp: requests.Response) -> Any:
    if not resp.content:
        return {}
    try:
        return resp.json()
    except ValueError:
        return {"message": resp.text}


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
