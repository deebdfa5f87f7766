"""Primitives shared by every service: errors, results, ports."""
