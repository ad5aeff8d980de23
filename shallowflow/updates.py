"""Net updates produced by a Riemann solver and how waves are turned into them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Sequence


class WetDryState(Enum):
    """Wet/dry configuration of the two cells adjacent to an edge."""

    DRY_DRY = auto()
    WET_WET = auto()
    WET_DRY_INUNDATION = auto()
    WET_DRY_WALL = auto()
    WET_DRY_WALL_INUNDATION = auto()
    DRY_WET_INUNDATION = auto()
    DRY_WET_WALL = auto()
    DRY_WET_WALL_INUNDATION = auto()


@dataclass(frozen=True)
class NetUpdates:
    """Net updates for the cells left and right of an edge.

    ``max_wave_speed`` is the largest absolute (linearised) wave speed at the
    edge and is meant for the CFL condition.
    """

    h_left: float = 0.0
    h_right: float = 0.0
    hu_left: float = 0.0
    hu_right: float = 0.0
    max_wave_speed: float = 0.0

    def without_left(self) -> NetUpdates:
        """The same updates with the left cell's contributions set to zero."""
        return replace(self, h_left=0.0, hu_left=0.0)

    def without_right(self) -> NetUpdates:
        """The same updates with the right cell's contributions set to zero."""
        return replace(self, h_right=0.0, hu_right=0.0)


def accumulate_waves(
    waves: Iterable[Sequence[float]],
    speeds: Iterable[float],
    zero_tolerance: float,
) -> NetUpdates:
    """Sum f-waves into net updates according to the sign of their speeds.

    Each wave is a pair ``(h_part, hu_part)``. Waves moving left (speed below
    ``-zero_tolerance``) update the left cell, waves moving right update the
    right cell, and waves whose speed is within the tolerance of zero are
    split equally between both cells.

    Raises ValueError if ``waves`` and ``speeds`` differ in length.
    """
    h_left = h_right = hu_left = hu_right = 0.0
    max_speed = 0.0
    for (h_part, hu_part), speed in zip(waves, speeds, strict=True):
        if speed < -zero_tolerance:
            h_left += h_part
            hu_left += hu_part
        elif speed > zero_tolerance:
            h_right += h_part
            hu_right += hu_part
        else:
            h_left += 0.5 * h_part
            hu_left += 0.5 * hu_part
            h_right += 0.5 * h_part
            hu_right += 0.5 * hu_part
        max_speed = max(max_speed, abs(speed))
    return NetUpdates(h_left, h_right, hu_left, hu_right, max_speed)