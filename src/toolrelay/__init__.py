"""toolrelay — a fixed catalogue of local tools for an LLM agent loop."""

from __future__ import annotations

__version__ = "0.1.0"
