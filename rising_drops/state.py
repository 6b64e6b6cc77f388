"""Shared simulation state handed to every drop operation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SimulationState:
    """Canvas extent, score and global tuning that drops read and write.

    ``merged_pairs`` holds the ids of drop pairs that already merged during
    the current frame; the simulation clears it at the start of each tick.
    """
    width: float
    height: float
    max_radius: float = 75.0
    speed_multiplier: float = 1.0
    score: float = 0.0
    merged_pairs: set[tuple[int, int]] = field(default_factory=set)

    def begin_frame(self) -> None:
        self.merged_pairs.clear()

    def claim_pair(self, a: object, b: object) -> bool:
        """Record that ``a`` and ``b`` merge this frame; False if they already did."""
        key = (min(id(a), id(b)), max(id(a), id(b)))
        if key in self.merged_pairs:
            return False
        self.merged_pairs.add(key)
        return True
