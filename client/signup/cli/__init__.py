"""Command-line interface entry point."""

from __future__ import annotations

from .register import signup_cli


def main() -> None:
    """Run the ``signup`` command group."""
    signup_cli(obj={})


__all__ = ["main", "signup_cli"]
