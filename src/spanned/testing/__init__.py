from __future__ import annotations

from .corpus import ReferenceCursor, generate_cuts, generate_texts, reference_position

__all__ = [
    "ReferenceCursor",
    "generate_cuts",
    "generate_texts",
    "reference_position",
]
