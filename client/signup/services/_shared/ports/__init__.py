"""
signup.services._shared.ports
=============================

*Ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`registration_gateway`:
    Defines :class:`~.RegistrationGateway`, the abstraction for the remote
    account-creation call, and :class:`~.StubRegistrationGateway`, an
    in-memory implementation for tests.

Design Notes
------------
Concrete adapters (e.g., the ``requests`` HTTP client) implement these
interfaces under ``signup.infra``.
"""

from __future__ import annotations

from .registration_gateway import RegistrationGateway, StubRegistrationGateway

__all__ = ["RegistrationGateway", "StubRegistrationGateway"]
