"""Idempotent bootstrapper for local Python development environments."""

__version__ = "0.1.0"
