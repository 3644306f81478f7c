from __future__ import annotations

from .corpus import generate_commands, generate_sources, snapshot_digest

__all__ = ["generate_commands", "generate_sources", "snapshot_digest"]
