"""Transposition cipher engines."""

from app.services.engines.transposition.rail_fence import RailFenceEngine, rail_fence

__all__ = [
    "RailFenceEngine",
    "rail_fence",
]
