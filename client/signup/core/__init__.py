"""Cross-cutting concerns: configuration, logging, errors, wiring."""
