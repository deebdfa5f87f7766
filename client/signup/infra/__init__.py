"""Adapters implementing the service-layer ports."""
