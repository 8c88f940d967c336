from __future__ import annotations

from .corpus import generate_texts, linear_pos_to_loc

__all__ = ["generate_texts", "linear_pos_to_loc"]
