"""Middle state of the homogeneous Riemann problem for the shallow water equations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto


class RiemannStructure(Enum):
    """Wave structure of a homogeneous Riemann problem."""

    DRY_SINGLE_RAREFACTION = auto()
    """1st family: contact discontinuity; 2nd family: rarefaction."""
    SINGLE_RAREFACTION_DRY = auto()
    """1st family: rarefaction; 2nd family: contact discontinuity."""
    SHOCK_SHOCK = auto()
    SHOCK_RAREFACTION = auto()
    RAREFACTION_SHOCK = auto()
    RAREFACTION_RAREFACTION = auto()


@dataclass(frozen=True)
class MiddleState:
    """Height and shock/inner rarefaction speeds of the middle state."""

    h_middle: float
    speeds: tuple[float, float]
    structure: RiemannStructure


def determine_riemann_structure(
    h_left: float, h_right: float, u_left: float, u_right: float, gravity: float
) -> RiemannStructure:
    """Classify the wave structure of a Riemann problem with two wet states."""
    h_min = min(h_left, h_right)
    h_max = max(h_left, h_right)
    u_dif = u_right - u_left

    if 0 <= 2.0 * (math.sqrt(gravity * h_min) - math.sqrt(gravity * h_max)) + u_dif:
        return RiemannStructure.RAREFACTION_RAREFACTION
    if (h_max - h_min) * math.sqrt(gravity * 0.5 * (1 / h_max + 1 / h_min)) + u_dif <= 0:
        return RiemannStructure.SHOCK_SHOCK
    if h_left < h_right:
        return RiemannStructure.SHOCK_RAREFACTION
    return RiemannStructure.RAREFACTION_SHOCK


def _shock_shock_height(
    h_left: float,
    h_right: float,
    u_left: float,
    u_right: float,
    gravity: float,
    newton_tolerance: float,
    max_iterations: int,
) -> float:
    h_middle = min(h_left, h_right)
    for _ in range(max_iterations):
        term_left = math.sqrt(0.5 * gravity * ((h_middle + h_left) / (h_middle * h_left)))
        term_right = math.sqrt(0.5 * gravity * ((h_middle + h_right) / (h_middle * h_right)))
        phi = (
            u_right
            - u_left
            + (h_middle - h_left) * term_left
            + (h_middle - h_right) * term_right
        )
        if abs(phi) < newton_tolerance:
            break
        derivative = (
            term_left
            + term_right
            - 0.25 * gravity * (h_middle - h_left) / (term_left * h_middle * h_middle)
            - 0.25 * gravity * (h_middle - h_right) / (term_right * h_middle * h_middle)
        )
        h_middle -= phi / derivative
    return h_middle


def _dam_break_height(
    h_min: float,
    h_max: float,
    u_left: float,
    u_right: float,
    gravity: float,
    newton_tolerance: float,
    max_iterations: int,
) -> tuple[float, float]:
    """Newton iteration for a shock/rarefaction pair; returns ``(h, sqrt(g h))``."""
    sqrt_g = math.sqrt(gravity)
    h_middle = h_min
    sqrt_g_h_middle = math.sqrt(gravity * h_middle)
    sqrt_g_h_max = math.sqrt(gravity * h_max)
    for _ in range(max_iterations):
        term_min = math.sqrt(0.5 * gravity * ((h_middle + h_min) / (h_middle * h_min)))
        phi = (
            u_right
            - u_left
            + (h_middle - h_min) * term_min
            + 2.0 * (sqrt_g_h_middle - sqrt_g_h_max)
        )
        if abs(phi) < newton_tolerance:
            break
        derivative = (
            term_min
            - 0.25 * gravity * (h_middle - h_min) / (h_middle * h_middle * term_min)
            + sqrt_g / sqrt_g_h_middle
        )
        h_middle -= phi / derivative
        sqrt_g_h_middle = math.sqrt(gravity * h_middle)
    return h_middle, sqrt_g_h_middle


def compute_middle_state(
    h_left: float,
    h_right: float,
    u_left: float,
    u_right: float,
    gravity: float,
    dry_tolerance: float,
    newton_tolerance: float,
    max_iterations: int = 1,
) -> MiddleState:
    """Compute the middle state of the homogeneous Riemann problem.

    A dry side yields a single rarefaction with zero middle height; otherwise
    the middle height is found according to the wave structure, using at most
    ``max_iterations`` Newton steps where no closed form exists.
    """
    sqrt_g_h_right = math.sqrt(gravity * h_right)
    sqrt_g_h_left = math.sqrt(gravity * h_left)

    if h_left < dry_tolerance:
        speed = u_right - 2.0 * sqrt_g_h_right
        return MiddleState(0.0, (speed, speed), RiemannStructure.DRY_SINGLE_RAREFACTION)
    if h_right < dry_tolerance:
        speed = u_left + 2.0 * sqrt_g_h_left
        return MiddleState(0.0, (speed, speed), RiemannStructure.SINGLE_RAREFACTION_DRY)

    structure = determine_riemann_structure(h_left, h_right, u_left, u_right, gravity)

    if structure is RiemannStructure.SHOCK_SHOCK:
        h_middle = _shock_shock_height(
            h_left, h_right, u_left, u_right, gravity, newton_tolerance, max_iterations
        )
        sqrt_g_h_middle = math.sqrt(gravity * h_middle)
    elif structure is RiemannStructure.RAREFACTION_RAREFACTION:
        root = max(0.0, u_left - u_right + 2.0 * (sqrt_g_h_left + sqrt_g_h_right))
        h_middle = 1.0 / (16.0 * gravity) * root * root
        sqrt_g_h_middle = math.sqrt(gravity * h_middle)
    else:
        if structure is RiemannStructure.SHOCK_RAREFACTION:
            h_min, h_max = h_left, h_right
        else:
            h_min, h_max = h_right, h_left
        h_middle, sqrt_g_h_middle = _dam_break_height(
            h_min, h_max, u_left, u_right, gravity, newton_tolerance, max_iterations
        )

    speeds = (
        u_left + 2.0 * sqrt_g_h_left - 3.0 * sqrt_g_h_middle,
        u_right - 2.0 * sqrt_g_h_right + 3.0 * sqrt_g_h_middle,
    )
    return MiddleState(h_middle, speeds, structure)